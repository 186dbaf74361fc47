"""Pydantic schemas for inventory, host and cluster records."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator


class DriveType(str, Enum):
    """Drive types reported by hardware inventory."""

    UNKNOWN = "Unknown"
    HDD = "HDD"
    FDD = "FDD"
    ODD = "ODD"
    SSD = "SSD"
    VIRTUAL = "virtual"
    MULTIPATH = "Multipath"
    ISCSI = "iSCSI"
    FC = "FC"
    LVM = "LVM"
    RAID = "RAID"
    ECKD = "ECKD"
    ECKD_ESE = "ECKD (ESE)"
    FBA = "FBA"


class HostRole(str, Enum):
    """Node roles."""

    MASTER = "master"
    WORKER = "worker"
    ARBITER = "arbiter"
    BOOTSTRAP = "bootstrap"
    AUTO_ASSIGN = "auto-assign"

    @classmethod
    def parse(cls, value: str | None) -> HostRole | None:
        """Return the matching role, or None for empty/unrecognized values."""
        try:
            return cls(value)
        except ValueError:
            return None


class DiskEncryptionEnableOn(str, Enum):
    """Which roles get disk encryption."""

    ALL = "all"
    NONE = "none"
    MASTERS = "masters"
    ARBITERS = "arbiters"
    WORKERS = "workers"
    MASTERS_ARBITERS = "masters,arbiters"
    MASTERS_WORKERS = "masters,workers"
    ARBITERS_WORKERS = "arbiters,workers"
    MASTERS_ARBITERS_WORKERS = "masters,arbiters,workers"

    @property
    def roles(self) -> frozenset[str]:
        """Role tokens in the scope (empty for ALL/NONE)."""
        if self in (DiskEncryptionEnableOn.ALL, DiskEncryptionEnableOn.NONE):
            return frozenset()
        return frozenset(self.value.split(","))


# --- Inventory ---


class Disk(BaseModel):
    """
    One storage device from a hardware inventory report.

    Disks are snapshots: the model is frozen so instances can be
    compared and hashed but never modified after parsing.
    """

    model_config = {"frozen": True}

    id: str = ""
    name: str = ""
    by_path: str = ""
    path: str = ""
    drive_type: str = ""
    holders: str = ""  # Multipath holder device name, for member disks

    @property
    def device_path(self) -> str:
        """The /dev path built from the kernel name."""
        return f"/dev/{self.name}"


class Inventory(BaseModel):
    """Hardware inventory, reduced to the fields read here."""

    disks: list[Disk] = Field(default_factory=list)

    @field_validator("disks", mode="before")
    @classmethod
    def normalize_disks(cls, v: Any) -> list[Any]:
        """Treat an explicit null as no disks."""
        if v is None:
            return []
        return v


# --- Ignition config overrides (subset) ---


class CertificateAuthority(BaseModel):
    source: str | None = None


class TLSSection(BaseModel):
    certificate_authorities: list[CertificateAuthority] = Field(
        default_factory=list, alias="certificateAuthorities"
    )

    model_config = {"populate_by_name": True}

    @field_validator("certificate_authorities", mode="before")
    @classmethod
    def normalize_authorities(cls, v: Any) -> list[Any]:
        if v is None:
            return []
        if isinstance(v, list):
            return [ca for ca in v if ca is not None]
        return v


class SecuritySection(BaseModel):
    tls: TLSSection = Field(default_factory=TLSSection)

    @field_validator("tls", mode="before")
    @classmethod
    def normalize_tls(cls, v: Any) -> Any:
        return {} if v is None else v


class IgnitionSection(BaseModel):
    # The ignition spec version is not interpreted
    security: SecuritySection = Field(default_factory=SecuritySection)

    @field_validator("security", mode="before")
    @classmethod
    def normalize_security(cls, v: Any) -> Any:
        return {} if v is None else v


class IgnitionOverrides(BaseModel):
    """
    The part of an ignition config override document that carries
    additional trust: ignition.security.tls.certificateAuthorities[*].source.

    Unrecognized fields are ignored. Missing or null sections contribute
    no certificates.
    """

    ignition: IgnitionSection = Field(default_factory=IgnitionSection)

    @model_validator(mode="before")
    @classmethod
    def normalize_document(cls, data: Any) -> Any:
        """Treat a null document as an empty one."""
        return {} if data is None else data

    @field_validator("ignition", mode="before")
    @classmethod
    def normalize_ignition(cls, v: Any) -> Any:
        return {} if v is None else v

    def certificate_sources(self) -> list[str]:
        """Data URL sources of the declared certificate authorities."""
        return [
            ca.source
            for ca in self.ignition.security.tls.certificate_authorities
            if ca.source
        ]


# --- Records ---


class HostSchema(BaseModel):
    """
    Schema for a host record.

    Note: The host ID is the dictionary key in the store, not a field.
    The raw JSON documents (inventory, ignition overrides) are kept as
    strings and only parsed when a resolver needs them.
    """

    cluster_id: str | None = None
    role: str = HostRole.AUTO_ASSIGN.value
    machine_config_pool_name: str | None = None

    # Recorded installation disk (either may be empty)
    installation_disk_id: str = ""
    installation_disk_path: str = ""

    ignition_endpoint_token: str | None = None
    ignition_config_overrides: str | None = None
    inventory: str = ""

    @field_validator("role", mode="before")
    @classmethod
    def normalize_role(cls, v: Any) -> str:
        if v is None:
            return ""
        if isinstance(v, Enum):
            return v.value
        return v


class ClusterSchema(BaseModel):
    """Schema for a cluster record."""

    name: str | None = None
    api_vip_dns_name: str = ""
    base_dns_domain: str | None = None
    ignition_endpoint_url: str | None = None
    ignition_endpoint_ca_certificate: str | None = None  # base64 PEM bundle
    disk_encryption_enable_on: DiskEncryptionEnableOn = DiskEncryptionEnableOn.NONE


class StoreSchema(BaseModel):
    """Schema for a host/cluster store file."""

    clusters: dict[str, ClusterSchema] = Field(default_factory=dict)
    hosts: dict[str, HostSchema] = Field(default_factory=dict)


# --- Settings ---


class ResolverSettings(BaseModel):
    """Ports, prefixes and pool names used to build ignition URLs."""

    http_port: int = 22624
    https_port: int = 22623
    config_path_prefix: str = "config/"
    api_prefix: str = "api."
    internal_api_prefix: str = "api-int."
    master_pool: str = "master"
    worker_pool: str = "worker"

    @classmethod
    def load(cls, path: str | Path) -> ResolverSettings:
        """Load settings from a YAML file. Missing keys keep their defaults."""
        path = Path(path)
        with path.open() as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))

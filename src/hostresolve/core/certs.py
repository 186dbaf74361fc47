"""PEM certificate bundles and data URL sources."""

from __future__ import annotations

import base64
import binascii
import logging
import re
import ssl
from typing import Iterable
from urllib.parse import unquote_to_bytes

from hostresolve.core.errors import InvalidCertificateError

logger = logging.getLogger(__name__)

_PEM_BLOCK = re.compile(
    r"-----BEGIN ([A-Z0-9 ]+)-----(.*?)-----END \1-----",
    re.DOTALL,
)
_BASE64_MARKER = ";base64"


def _is_der_sequence(der: bytes) -> bool:
    """Check that der is exactly one DER SEQUENCE (the outer frame of a certificate)."""
    if len(der) < 2 or der[0] != 0x30:
        return False
    first = der[1]
    if first < 0x80:
        length, offset = first, 2
    else:
        size = first & 0x7F
        if size == 0 or size > 4 or len(der) < 2 + size:
            return False
        length = int.from_bytes(der[2 : 2 + size], "big")
        offset = 2 + size
    return offset + length == len(der)


def _is_x509_certificate(der: bytes) -> bool:
    """Check that OpenSSL parses der as an X.509 certificate."""
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    try:
        context.load_verify_locations(cadata=der)
    except ssl.SSLError:
        return False
    return True


def parse_pem_bundle(data: bytes | str) -> list[bytes]:
    """
    Parse a concatenated PEM bundle into raw DER certificates.

    Text outside PEM blocks is ignored. A bundle without any certificate,
    or with a block that does not decode, is invalid.
    """
    if isinstance(data, bytes):
        try:
            text = data.decode("ascii")
        except UnicodeDecodeError as e:
            raise InvalidCertificateError("Certificate bundle is not PEM text") from e
    else:
        text = data

    certs: list[bytes] = []
    for match in _PEM_BLOCK.finditer(text):
        block_type, body = match.group(1), match.group(2)
        if block_type != "CERTIFICATE":
            raise InvalidCertificateError(f"Unexpected PEM block in bundle: {block_type}")
        try:
            der = base64.b64decode("".join(body.split()), validate=True)
        except binascii.Error as e:
            raise InvalidCertificateError(f"Invalid base64 in PEM certificate: {e}") from e
        if not _is_der_sequence(der) or not _is_x509_certificate(der):
            raise InvalidCertificateError("PEM block does not contain an X.509 certificate")
        certs.append(der)

    if not certs:
        raise InvalidCertificateError("No PEM certificates found in bundle")
    return certs


def encode_pem_bundle(certs: Iterable[bytes]) -> str:
    """Encode DER certificates as a concatenated PEM bundle."""
    return "".join(ssl.DER_cert_to_PEM_cert(der) for der in certs)


def decode_bundle(encoded: str) -> list[bytes]:
    """Decode a base64-encoded PEM bundle into raw DER certificates."""
    try:
        pem = base64.b64decode("".join(encoded.split()), validate=True)
    except binascii.Error as e:
        raise InvalidCertificateError(f"Certificate bundle is not valid base64: {e}") from e
    return parse_pem_bundle(pem)


def decode_data_url(source: str) -> bytes:
    """
    Decode the payload of a data URL.

    Handles both data:<mediatype>;base64,<payload> and the
    percent-escaped form without the base64 marker.
    """
    if not source.startswith("data:") or "," not in source:
        raise InvalidCertificateError("Certificate source is not a data URL")

    header, payload = source[len("data:") :].split(",", 1)
    if header.endswith(_BASE64_MARKER):
        try:
            return base64.b64decode(unquote_to_bytes(payload), validate=True)
        except binascii.Error as e:
            raise InvalidCertificateError(f"Invalid base64 in data URL: {e}") from e
    return unquote_to_bytes(payload)


def merge_certificates(*groups: Iterable[bytes]) -> list[bytes]:
    """
    Concatenate certificate groups, dropping duplicates.

    Certificates are compared by their DER bytes; the first occurrence
    keeps its position.
    """
    seen: set[bytes] = set()
    merged: list[bytes] = []
    total = 0
    for group in groups:
        for der in group:
            total += 1
            if der in seen:
                continue
            seen.add(der)
            merged.append(der)
    logger.debug("Merged %d CA certificates, %d unique", total, len(merged))
    return merged


def encode_merged_bundle(certs: list[bytes]) -> str | None:
    """Base64-encode a PEM bundle of the certificates, or None if there are none."""
    if not certs:
        return None
    pem = encode_pem_bundle(certs)
    return base64.b64encode(pem.encode("ascii")).decode("ascii")

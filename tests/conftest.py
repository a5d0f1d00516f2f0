import pytest
from fastapi.testclient import TestClient

from common.models import NdefRecord


@pytest.fixture(scope="session")
def client() -> TestClient:
    """
    Synchronous TestClient fixture for the FastAPI app.
    Use this for API endpoint testing.
    """
    from ndef_daemon.main import app

    with TestClient(app=app, base_url="http://test") as c:
        yield c


def tlv(tlv_type: int, value: bytes) -> bytes:
    """Encode one Wi-Fi Simple Config TLV attribute."""
    return tlv_type.to_bytes(2, "big") + len(value).to_bytes(2, "big") + value


@pytest.fixture
def make_tlv():
    return tlv


@pytest.fixture
def wifi_payload() -> bytes:
    """A Wi-Fi Simple Config payload carrying SSID 'Home' and key 'secret'."""
    credential = (
        tlv(0x1026, b"\x01")  # Network Index
        + tlv(0x1045, b"Home")
        + tlv(0x1003, b"\x00\x20")  # WPA2-Personal
        + tlv(0x100F, b"\x00\x08")  # AES
        + tlv(0x1027, b"secret")
        + tlv(0x1020, b"\xff" * 6)  # MAC Address
    )
    return tlv(0x104A, b"\x10") + tlv(0x100E, credential)


@pytest.fixture
def text_record() -> NdefRecord:
    return NdefRecord(tnf=0x01, type=b"T", payload=b"\x02enHi")


@pytest.fixture
def uri_record() -> NdefRecord:
    return NdefRecord(tnf=0x01, type=b"U", payload=b"\x01nfc-rewriter.com")

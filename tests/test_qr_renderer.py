from src.qr_attendance.qr_attendance.common.session_codes import mask_device
from src.qr_attendance.qr_attendance.qr.renderer import build_scan_url


def test_scan_url_encodes_code():
    assert build_scan_url("http://host:3000/", "ybs311 week-4") == "http://host:3000/scan?code=ybs311+week-4&auto=1"


def test_mask_device():
    assert mask_device("0123456789") == "0123...6789"
    assert mask_device("01234567") == "01234567"
    assert mask_device(None) == ""

"""Unit tests for protocol value objects and key normalization."""

import pytest

from mock_regionserver.domain.keys import to_key
from mock_regionserver.domain.protocol import (
    ROOT_REGION_INFO,
    GetRequest,
    GetResponse,
    Scan,
    ScanRequest,
    ScanResponse,
)


@pytest.mark.tier(1)
@pytest.mark.tra("Domain.Invariant.Keys")
class TestToKey:
    """Test bytes-like key normalization."""

    def test_bytes_pass_through(self) -> None:
        key = b"row1"

        assert to_key(key) is key

    @pytest.mark.parametrize("value", [bytearray(b"row1"), memoryview(b"row1")])
    def test_bytes_like_becomes_bytes(self, value) -> None:
        key = to_key(value)

        assert type(key) is bytes
        assert key == b"row1"

    @pytest.mark.parametrize("value", ["row1", 1, None])
    def test_rejects_non_bytes(self, value) -> None:
        with pytest.raises(TypeError, match="bytes-like"):
            to_key(value)


@pytest.mark.tier(1)
@pytest.mark.tra("Domain.Invariant.Protocol")
class TestRequests:
    """Test request value objects."""

    def test_get_request_normalizes_keys(self) -> None:
        request = GetRequest(region=bytearray(b"r"), row=memoryview(b"k"))

        assert request.region == b"r"
        assert request.row == b"k"
        assert request == GetRequest(region=b"r", row=b"k")

    def test_scan_request_with_scan_is_open_call(self) -> None:
        request = ScanRequest(region=b"r", scan=Scan(start_row=b"a"))

        assert request.has_scan is True

    def test_scan_request_with_handle_is_next_call(self) -> None:
        request = ScanRequest(scanner_id=99)

        assert request.has_scan is False
        assert request.region is None
        assert request.number_of_rows == 1

    def test_scan_request_normalizes_region(self) -> None:
        assert ScanRequest(region=bytearray(b"r"), scan=Scan()).region == b"r"


@pytest.mark.tier(1)
@pytest.mark.tra("Domain.Invariant.Protocol")
class TestResponses:
    """Test response defaults."""

    def test_get_response_defaults_to_no_result(self) -> None:
        assert GetResponse().result is None

    def test_scan_response_defaults(self) -> None:
        response = ScanResponse()

        assert response.scanner_id is None
        assert response.results == ()
        assert response.more_results is False

    def test_root_region_info(self) -> None:
        assert ROOT_REGION_INFO.table_name == b"-ROOT-"
        assert ROOT_REGION_INFO.region_name == b"-ROOT-,,0"
        assert ROOT_REGION_INFO.start_key == b""
        assert ROOT_REGION_INFO.end_key == b""

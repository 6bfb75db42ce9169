import pytest
from pytest_mock import MockType
from ad_normalizer.exceptions.ldap import InvalidEntry, InvalidSID
from ad_normalizer.ldap.security_identifier import SID, resolve_sid


@pytest.fixture
def f_valid_sid_str() -> str:
	return "S-1-5-21-2209570321-9700970-2859064192-1159"


@pytest.fixture
def f_logger(mocker) -> MockType:
	return mocker.patch("ad_normalizer.ldap.security_identifier.logger", autospec=True)


def test_init_with_bytes(f_sid_bytes: bytes, f_valid_sid_str: str):
	sid = SID(f_sid_bytes)
	assert str(sid) == f_valid_sid_str
	assert sid.revision_level == 1
	assert sid.subauthority_count == 5
	assert sid.identifier_authority == 5
	assert sid.subauthorities == [21, 2209570321, 9700970, 2859064192, 1159]


def test_init_with_bytearray(f_sid_bytes: bytes, f_valid_sid_str: str):
	assert str(SID(bytearray(f_sid_bytes))) == f_valid_sid_str


def test_well_known_sid():
	# S-1-5-32-544 (BUILTIN\Administrators)
	sid = SID(b"\x01\x02\x00\x00\x00\x00\x00\x05\x20\x00\x00\x00\x20\x02\x00\x00")
	assert str(sid) == "S-1-5-32-544"
	assert repr(sid) == "SID('S-1-5-32-544')"


@pytest.mark.parametrize("value", (
	pytest.param(b"\x01\x05", id="header-too-short"),
	pytest.param(b"\x01\x05\x00\x00\x00\x00\x00\x05\x15\x00\x00\x00", id="truncated"),
))
def test_invalid_buffer_raises(value, f_logger: MockType):
	with pytest.raises(InvalidSID):
		SID(value)
	f_logger.error.assert_called_once()


def test_invalid_type_raises(f_logger: MockType):
	with pytest.raises(InvalidSID):
		SID("S-1-5-32-544")
	f_logger.error.assert_called_once()


def test_resolve_sid(f_entry, f_valid_sid_str: str):
	assert resolve_sid(f_entry) == f_valid_sid_str


def test_resolve_sid_missing_attribute_raises(f_entry):
	f_entry["attributes"] = f_entry["attributes"][:1]
	with pytest.raises(InvalidEntry):
		resolve_sid(f_entry)

import pytest
from copy import deepcopy
from ad_normalizer.config.runtime import RuntimeSettings


@pytest.fixture(autouse=True)
def resync_runtime_settings():
	yield
	RuntimeSettings.resync()


@pytest.fixture
def f_guid_bytes() -> bytes:
	return bytes.fromhex("10E7D4174D627849900B8549CB753699")


@pytest.fixture
def f_sid_bytes() -> bytes:
	return b"\x01\x05\x00\x00\x00\x00\x00\x05\x15\x00\x00\x00\x11^\xb3\x83j\x06\x94\x00\x80\xdbi\xaa\x87\x04\x00\x00"


@pytest.fixture
def f_entry(f_guid_bytes, f_sid_bytes) -> dict:
	return {
		"object": {
			"memberOf": [
				"CN=Group1,OU=Test,DC=domain,DC=com",
				"CN=Group2,OU=Test,OU=Test2,DC=domain,DC=com",
			],
			"mail": "test@domain.com",
			"telephoneNumber": "+1 12312312324",
			"name": "Test User",
		},
		"objectName": "CN=Test test,OU=Users,DC=domain,DC=local",
		"attributes": [
			{"type": "objectGUID", "buffers": [f_guid_bytes]},
			{"type": "objectSid", "buffers": [f_sid_bytes]},
		],
	}


@pytest.fixture
def f_entry_copy(f_entry):
	def maker(**object_overrides) -> dict:
		entry = deepcopy(f_entry)
		entry["object"].update(object_overrides)
		return entry

	return maker

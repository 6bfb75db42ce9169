################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: ad_normalizer.ldap.guid

# ! objectGUID is stored with its first three groups little-endian, the
# ! remaining two groups keep their original byte order.
# ---------------------------------- IMPORTS --------------------------------- #
import struct
import uuid
import logging
from typing import Union
from ad_normalizer.config.runtime import RuntimeSettings
from ad_normalizer.exceptions.ldap import InvalidGUID
from ad_normalizer.ldap.entry import DirectoryEntry, get_entry_buffer
################################################################################

logger = logging.getLogger(__name__)

GUID_BYTE_LENGTH = 16

# Reverse Bytes slice, byte slice indices
DATA_DEF_LDAP = [
	(True, slice(0, 4)),
	(True, slice(4, 6)),
	(True, slice(6, 8)),
	(False, slice(8, 10)),
	(False, slice(10, 16)),
]


class GUID:
	"""
	Decodes a raw objectGUID buffer into its canonical string.

	src:
	* https://learn.microsoft.com/en-us/openspecs/windows_protocols/ms-dtyp/49e490b8-f972-45d6-a3a4-99f924998d97
	* https://learn.microsoft.com/en-us/openspecs/windows_protocols/ms-dtyp/001eec5a-7f8b-4293-9e21-ca349392db40
	[MS-DTYP] Section 2.3.4.1 / 2.3.4.2

	SAMPLE DATA:
	  - objectGUID (hex): 10E7D4174D627849900B8549CB753699
	  - objectGUID (str): 17d4e710-624d-4978-900b-8549cb753699
	"""

	def __init__(self, guid: Union[bytes, bytearray, memoryview]):
		self.data = {}
		if not isinstance(guid, (bytes, bytearray, memoryview)):
			_msg = f"Unhandled type for GUID decoding ({type(guid).__name__})."
			logger.error(_msg)
			raise InvalidGUID(data={"detail": _msg})
		self.from_bytes(guid_bytes=bytes(guid))

	def from_bytes(self, guid_bytes: bytes):
		self.uuid_str = ""
		self.data_bytes_raw = guid_bytes
		if len(guid_bytes) != GUID_BYTE_LENGTH:
			logger.error(
				"Invalid GUID length (%d bytes), could not unpack.",
				len(guid_bytes),
			)
			raise InvalidGUID()
		self.data_bytes_int = struct.unpack("!16B", guid_bytes)
		self.data_bytes_hex = [format(b, "02x") for b in self.data_bytes_int]

		# Loop through Byte Group Data definition and create UUID String
		self.data = {}
		for d_index, (d_reverse, d_slice) in enumerate(DATA_DEF_LDAP):
			sliced_hex_list = self.data_bytes_hex[d_slice]
			if d_reverse:
				sliced_hex_list = list(reversed(sliced_hex_list))
			self.data[d_index] = "".join(sliced_hex_list)

		self.uuid_str = "-".join(
			[self.data[i] for i in range(len(DATA_DEF_LDAP))]
		)

		# Python's UUID reads the same little-endian layout
		if uuid.UUID(bytes_le=guid_bytes) != uuid.UUID(self.uuid_str):
			logger.error(f"Generated invalid UUID string: {self.uuid_str}")
			raise InvalidGUID()

	def __str__(self):
		return self.uuid_str

	def __repr__(self):
		return f"GUID('{self.uuid_str}')"


def resolve_guid(entry: DirectoryEntry) -> str:
	"""Resolves the canonical objectGUID string of a directory entry.

	Raises:
		InvalidEntry: When the entry has no objectGUID buffer.
		InvalidGUID: When the buffer is not 16 bytes long.
	"""
	return str(GUID(get_entry_buffer(entry, RuntimeSettings.LDAP_GUID_FIELD)))

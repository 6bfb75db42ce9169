################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: ad_normalizer.ldap.security_identifier

# ---------------------------------- IMPORTS --------------------------------- #
import logging
from typing import Union
from ad_normalizer.config.runtime import RuntimeSettings
from ad_normalizer.exceptions.ldap import InvalidSID
from ad_normalizer.ldap.entry import DirectoryEntry, get_entry_buffer
################################################################################

logger = logging.getLogger(__name__)

SID_HEADER_LENGTH = 8
SID_SUBAUTHORITY_LENGTH = 4


class SID:
	"""
	Returns a normalized Windows SID string given a byte array that contains the SID

	See:
	- https://ldapwiki.com/wiki/ObjectSID
	- https://msdn.microsoft.com/en-us/library/windows/desktop/aa379597(v=vs.85).aspx
	- https://blogs.msdn.microsoft.com/oldnewthing/20040315-00/?p=40253

	# Usage\n
	    sid = SID(b'\\x01\\x05\\x00\\x00\\x00\\x00\\x00\\x05\\x15\\x00...')\n
	    print(sid) # S-1-5-21-2209570321-9700970-2859064192-1159
	"""

	def __init__(self, security_identifier: Union[bytes, bytearray, memoryview]):
		if not isinstance(security_identifier, (bytes, bytearray, memoryview)):
			_msg = (
				"Unhandled type for SID decoding "
				f"({type(security_identifier).__name__})."
			)
			logger.error(_msg)
			raise InvalidSID(data={"detail": _msg})
		sid_byte_array = bytes(security_identifier)
		if len(sid_byte_array) < SID_HEADER_LENGTH:
			logger.error("SID buffer too short (%d bytes).", len(sid_byte_array))
			raise InvalidSID()

		self.sid_byte_array = sid_byte_array
		self.revision_level = sid_byte_array[0]
		self.subauthority_count = sid_byte_array[1]
		# 6 bytes - Identifier Authority
		self.identifier_authority = int.from_bytes(
			sid_byte_array[2:SID_HEADER_LENGTH], byteorder="big"
		)

		expected_length = (
			SID_HEADER_LENGTH + SID_SUBAUTHORITY_LENGTH * self.subauthority_count
		)
		if len(sid_byte_array) < expected_length:
			logger.error(
				"SID buffer truncated (%d bytes, expected %d).",
				len(sid_byte_array),
				expected_length,
			)
			raise InvalidSID()

		self.subauthorities = []
		offset = SID_HEADER_LENGTH
		for _ in range(self.subauthority_count):
			self.subauthorities.append(
				int.from_bytes(
					sid_byte_array[offset : offset + SID_SUBAUTHORITY_LENGTH],
					byteorder="little",
				)
			)
			offset += SID_SUBAUTHORITY_LENGTH

	def __str__(self):
		sid = "S-{0}-{1}".format(self.revision_level, self.identifier_authority)
		for rid in self.subauthorities:
			sid += "-{0}".format(rid)
		return sid

	def __repr__(self):
		return f"SID('{self}')"


def resolve_sid(entry: DirectoryEntry) -> str:
	"""Resolves the objectSid string of a directory entry."""
	return str(SID(get_entry_buffer(entry, RuntimeSettings.LDAP_SID_FIELD)))

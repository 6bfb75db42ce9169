################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: ad_normalizer.ldap.entry
# Contains:
# - Directory Entry type hints
# - Entry object and binary attribute accessors
################################################################################

# ---------------------------------- IMPORTS --------------------------------- #
from typing import Any, Mapping, Sequence, TypedDict, Required, NotRequired
from ad_normalizer.constants.attrs import (
	LDAP_ENTRY_OBJECT,
	LDAP_ENTRY_ATTRIBUTES,
	LDAP_ENTRY_ATTRIBUTE_TYPE,
	LDAP_ENTRY_ATTRIBUTE_BUFFERS,
)
from ad_normalizer.exceptions.ldap import InvalidEntry
import logging

################################################################################
logger = logging.getLogger(__name__)


class EntryAttribute(TypedDict):
	type: Required[str]
	buffers: Required[Sequence[bytes]]


class DirectoryEntry(TypedDict):
	object: Required[Mapping[str, Any]]
	objectName: NotRequired[str]
	attributes: NotRequired[Sequence[EntryAttribute]]


def get_entry_object(entry: DirectoryEntry) -> Mapping[str, Any]:
	"""Returns the attribute mapping of a directory entry.

	Raises:
		InvalidEntry: When the entry or its object mapping is missing.
	"""
	if not isinstance(entry, Mapping):
		raise InvalidEntry(
			data={"detail": "LDAP Entry must be a mapping."}
		)
	entry_object = entry.get(LDAP_ENTRY_OBJECT)
	if not isinstance(entry_object, Mapping):
		raise InvalidEntry(
			data={"detail": f"LDAP Entry has no {LDAP_ENTRY_OBJECT} mapping."}
		)
	return entry_object


def get_entry_buffer(entry: DirectoryEntry, attribute_type: str) -> bytes:
	"""Returns the first raw buffer of a binary entry attribute.

	Args:
		entry (DirectoryEntry): Entry returned by the directory client.
		attribute_type (str): Attribute type to look up (e.g.: objectGUID).

	Raises:
		InvalidEntry: When the entry, its attributes, the matching attribute
			or its first buffer are missing.

	Returns:
		bytes
	"""
	if not isinstance(entry, Mapping):
		raise InvalidEntry(
			data={"detail": "LDAP Entry must be a mapping."}
		)
	attributes = entry.get(LDAP_ENTRY_ATTRIBUTES)
	if not attributes or isinstance(attributes, (str, bytes)):
		raise InvalidEntry(
			data={"detail": f"LDAP Entry has no {LDAP_ENTRY_ATTRIBUTES}."}
		)

	for attribute in attributes:
		if not isinstance(attribute, Mapping):
			continue
		if attribute.get(LDAP_ENTRY_ATTRIBUTE_TYPE) != attribute_type:
			continue
		buffers = attribute.get(LDAP_ENTRY_ATTRIBUTE_BUFFERS)
		if not buffers:
			break
		buffer = buffers[0]
		if not isinstance(buffer, (bytes, bytearray, memoryview)):
			break
		return bytes(buffer)

	logger.debug("Entry attribute %s not found or empty.", attribute_type)
	raise InvalidEntry(
		data={"detail": f"LDAP Entry has no {attribute_type} buffer."}
	)

################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: ad_normalizer.ldap.user
# Contains the normalized User Object builder.
################################################################################

# ---------------------------------- IMPORTS --------------------------------- #
from typing import TypedDict, Required, Optional
from ad_normalizer.config.runtime import RuntimeSettings
from ad_normalizer.constants.attrs import (
	LDAP_ENTRY_OBJECT_NAME,
	LOCAL_ATTR_GROUPS,
	LOCAL_ATTR_EMAIL,
	LOCAL_ATTR_PHONE,
	LOCAL_ATTR_NAME,
	LOCAL_ATTR_GUID,
	LOCAL_ATTR_DN,
)
from ad_normalizer.ldap.entry import DirectoryEntry, get_entry_object
from ad_normalizer.ldap.groups import resolve_groups
from ad_normalizer.ldap.guid import resolve_guid
import logging

################################################################################
logger = logging.getLogger(__name__)

USER_PASSTHROUGH_FIELDS = (
	LOCAL_ATTR_EMAIL,
	LOCAL_ATTR_PHONE,
	LOCAL_ATTR_NAME,
)


class UserObject(TypedDict):
	groups: Required[list[str]]
	mail: Required[Optional[str]]
	phone: Required[Optional[str]]
	name: Required[Optional[str]]
	guid: Required[str]
	dn: Required[Optional[str]]


def create_user_obj(entry: DirectoryEntry) -> UserObject:
	"""Builds a normalized User Object from a directory entry.

	Raises:
		InvalidEntry: When the entry, its object mapping or its objectGUID
			buffer is missing.
		InvalidGUID: When the objectGUID buffer is not 16 bytes long.

	Returns:
		UserObject
	"""
	groups = resolve_groups(entry)
	guid = resolve_guid(entry)
	entry_object = get_entry_object(entry)

	user: UserObject = {LOCAL_ATTR_GROUPS: groups}
	for local_alias in USER_PASSTHROUGH_FIELDS:
		ldap_alias = RuntimeSettings.LDAP_USER_FIELD_MAP.get(
			local_alias, local_alias
		)
		user[local_alias] = entry_object.get(ldap_alias)
	user[LOCAL_ATTR_GUID] = guid
	user[LOCAL_ATTR_DN] = entry.get(LDAP_ENTRY_OBJECT_NAME)
	logger.debug("Built user object for %s", user[LOCAL_ATTR_DN])
	return user

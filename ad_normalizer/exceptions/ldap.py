from ad_normalizer.exceptions.base import InvalidArgument

# LDAP Entry Normalization Exceptions


class InvalidEntry(InvalidArgument):
	default_detail = "LDAP Entry is missing required data or is malformed"
	default_code = "ldap_entry_invalid"


class InvalidGUID(InvalidArgument):
	default_detail = "LDAP objectGUID must be a 16 byte buffer"
	default_code = "ldap_guid_invalid"


class InvalidSID(InvalidArgument):
	default_detail = "LDAP objectSid buffer is truncated or malformed"
	default_code = "ldap_sid_invalid"


class InvalidTimestamp(InvalidArgument):
	default_detail = "LDAP Generalized Time must match YYYYMMDDHHMMSS.fZ"
	default_code = "ldap_timestamp_invalid"

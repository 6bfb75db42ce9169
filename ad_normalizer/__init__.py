from ad_normalizer.ldap.bind_error import AuthFailure, resolve_bind_error
from ad_normalizer.ldap.entry import DirectoryEntry, EntryAttribute
from ad_normalizer.ldap.groups import Membership, resolve_groups
from ad_normalizer.ldap.guid import GUID, resolve_guid
from ad_normalizer.ldap.logon import LogonType, clean_sama, detect_logon_type
from ad_normalizer.ldap.security_identifier import SID, resolve_sid
from ad_normalizer.ldap.user import UserObject, create_user_obj
from ad_normalizer.utils.datetime import convert_from_date, convert_to_date
from ad_normalizer.utils.filetime import convert_filetime

__version__ = "1.0.0"

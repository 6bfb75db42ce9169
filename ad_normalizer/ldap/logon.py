################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: ad_normalizer.ldap.logon
# Contains logon name classification and sAMAccountName cleanup.
################################################################################

# ---------------------------------- IMPORTS --------------------------------- #
from enum import Enum
from ad_normalizer.constants.attrs import (
	LDAP_ATTR_UPN,
	LDAP_ATTR_DN,
	LDAP_ATTR_USERNAME_SAMBA_ADDS,
	LDAP_UPN_SEPARATOR,
	LDAP_SAM_DOMAIN_SEPARATOR,
)
from ldap3.core.exceptions import LDAPInvalidDnError
from ldap3.utils.dn import parse_dn
import logging

################################################################################
logger = logging.getLogger(__name__)


class LogonType(str, Enum):
	USER_PRINCIPAL_NAME = LDAP_ATTR_UPN
	DISTINGUISHED_NAME = LDAP_ATTR_DN
	SAM_ACCOUNT_NAME = LDAP_ATTR_USERNAME_SAMBA_ADDS

	def __str__(self):
		return self.value


def is_distinguished_name(v: str) -> bool:
	"""Check if a string parses as an LDAP Distinguished Name."""
	if not isinstance(v, str):
		raise TypeError("is_distinguished_name value must be of type str.")
	if not v.strip():
		return False
	try:
		parse_dn(v)
	except (LDAPInvalidDnError, ValueError):
		return False
	return True


def detect_logon_type(logon: str) -> LogonType:
	"""Classifies a raw logon string.

	Precedence: userPrincipalName (contains @), distinguishedName
	(parses as a DN), sAMAccountName (anything else, including
	DOMAIN\\name).
	"""
	if not isinstance(logon, str):
		raise TypeError("detect_logon_type value must be of type str.")

	if LDAP_UPN_SEPARATOR in logon:
		r = LogonType.USER_PRINCIPAL_NAME
	elif is_distinguished_name(logon):
		r = LogonType.DISTINGUISHED_NAME
	else:
		r = LogonType.SAM_ACCOUNT_NAME
	logger.debug("Logon %r detected as %s", logon, r)
	return r


def clean_sama(v: str) -> str:
	"""Strips the domain prefix from a DOMAIN\\account string."""
	if not isinstance(v, str):
		raise TypeError("clean_sama value must be of type str.")
	return v.rsplit(LDAP_SAM_DOMAIN_SEPARATOR, 1)[-1]

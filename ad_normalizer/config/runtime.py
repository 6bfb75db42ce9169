################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: ad_normalizer.config.runtime
# Description:	Contains the RuntimeSettingsSingleton global instance, built
# from file defaults and Django settings overrides.
#
# ---------------------------------- IMPORTS --------------------------------- #
from ad_normalizer.config import defaults
from django.conf import settings as django_settings
from django.core.exceptions import ImproperlyConfigured
from copy import deepcopy
import sys
import logging
from uuid import uuid1, getnode as uuid_getnode
from random import getrandbits
################################################################################

logger = logging.getLogger(__name__)
this_module = sys.modules[__name__]

# ! You also have to add the settings to the following files:
# ad_normalizer.config.runtime <--- You're Here
# ad_normalizer.config.defaults
SETTING_KEYS = (
	"LDAP_GROUP_FIELD",
	"LDAP_GUID_FIELD",
	"LDAP_SID_FIELD",
	"LDAP_USER_FIELD_MAP",
	"BIND_ERROR_INVALID_CREDENTIALS",
	"BIND_ERROR_LOCKOUT_CODE",
	"BIND_ERROR_MSG_LOCKED_OUT",
	"BIND_ERROR_MSG_INVALID_CREDENTIALS",
	"BIND_ERROR_MSG_UNKNOWN",
)


class RuntimeSettingsSingleton:
	_instance = None
	_initialized = False
	LDAP_GROUP_FIELD = defaults.LDAP_GROUP_FIELD
	LDAP_GUID_FIELD = defaults.LDAP_GUID_FIELD
	LDAP_SID_FIELD = defaults.LDAP_SID_FIELD
	LDAP_USER_FIELD_MAP = defaults.LDAP_USER_FIELD_MAP
	BIND_ERROR_INVALID_CREDENTIALS = defaults.BIND_ERROR_INVALID_CREDENTIALS
	BIND_ERROR_LOCKOUT_CODE = defaults.BIND_ERROR_LOCKOUT_CODE
	BIND_ERROR_MSG_LOCKED_OUT = defaults.BIND_ERROR_MSG_LOCKED_OUT
	BIND_ERROR_MSG_INVALID_CREDENTIALS = (
		defaults.BIND_ERROR_MSG_INVALID_CREDENTIALS
	)
	BIND_ERROR_MSG_UNKNOWN = defaults.BIND_ERROR_MSG_UNKNOWN

	# Singleton def
	def __new__(cls, *args, **kwargs):
		if cls._instance is None:
			cls._instance = super().__new__(cls, *args, **kwargs)
		return cls._instance

	def __new_uuid__(self):
		self.uuid = uuid1(node=uuid_getnode(), clock_seq=getrandbits(14))

	def __init__(self):
		if self._initialized:
			return
		self.resync()
		self._initialized = True

	def resync(self) -> None:
		self.__new_uuid__()
		for k, v in self.get_settings(self.uuid).items():
			setattr(self, k, v)

	def get_settings(self, uuid, quiet=False) -> dict:
		if not quiet:
			logger.debug(
				"Synchronizing settings for %s (Configuration Instance %s)",
				this_module.__name__,
				uuid,
			)
		r = {k: deepcopy(getattr(defaults, k)) for k in SETTING_KEYS}

		try:
			overrides: dict = getattr(
				django_settings, defaults.SETTINGS_OVERRIDE_KEY, None
			) or {}
		except ImproperlyConfigured:
			# Used outside of a configured Django project
			return r

		for setting_key, setting_value in overrides.items():
			if setting_key not in SETTING_KEYS:
				logger.warning(
					"Ignoring unknown %s setting: %s",
					defaults.SETTINGS_OVERRIDE_KEY,
					setting_key,
				)
				continue
			r[setting_key] = setting_value
		return r


RuntimeSettings = RuntimeSettingsSingleton()

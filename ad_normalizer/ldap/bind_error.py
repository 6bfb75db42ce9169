################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: ad_normalizer.ldap.bind_error
# Contains:
# - Authentication failure variants
# - Bind error to human readable cause resolution
################################################################################

# ---------------------------------- IMPORTS --------------------------------- #
from dataclasses import dataclass
from typing import Any, Mapping, Union
from ad_normalizer.config.runtime import RuntimeSettings
import logging

################################################################################
logger = logging.getLogger(__name__)

BIND_ERROR_NAME_KEY = "name"
BIND_ERROR_MESSAGE_KEY = "lde_message"


@dataclass(frozen=True)
class InvalidCredentials:
	message: str


@dataclass(frozen=True)
class OtherBindError:
	name: str
	message: str


@dataclass(frozen=True)
class Unrecognized:
	value: Any


class AuthFailure:
	"""Builds the authentication failure variant for a raw bind error."""

	@staticmethod
	def _get_fields(value: Any) -> tuple[Any, Any]:
		if isinstance(value, Mapping):
			return (
				value.get(BIND_ERROR_NAME_KEY),
				value.get(BIND_ERROR_MESSAGE_KEY),
			)
		if isinstance(value, (str, bytes, int, float, bool)) or value is None:
			return None, None
		return (
			getattr(value, BIND_ERROR_NAME_KEY, None),
			getattr(value, BIND_ERROR_MESSAGE_KEY, None),
		)

	@classmethod
	def from_value(
		cls, value: Any
	) -> Union[InvalidCredentials, OtherBindError, Unrecognized]:
		try:
			name, message = cls._get_fields(value)
		except Exception as e:
			logger.warning("Could not read bind error fields.", exc_info=e)
			return Unrecognized(value)
		if not isinstance(name, str) or not isinstance(message, str):
			return Unrecognized(value)
		if name == RuntimeSettings.BIND_ERROR_INVALID_CREDENTIALS:
			return InvalidCredentials(message)
		return OtherBindError(name, message)


def resolve_bind_error(value: Any) -> str:
	"""Returns a human readable cause for a bind failure. Never raises."""
	failure = AuthFailure.from_value(value)
	logger.debug("Resolving bind error %r", failure)

	if isinstance(failure, InvalidCredentials):
		if RuntimeSettings.BIND_ERROR_LOCKOUT_CODE in failure.message:
			return RuntimeSettings.BIND_ERROR_MSG_LOCKED_OUT
		return RuntimeSettings.BIND_ERROR_MSG_INVALID_CREDENTIALS
	return RuntimeSettings.BIND_ERROR_MSG_UNKNOWN

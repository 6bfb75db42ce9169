import pytest
from pytest_mock import MockerFixture
from django.core.exceptions import ImproperlyConfigured
from ad_normalizer.config import defaults
from ad_normalizer.config.runtime import (
	RuntimeSettings,
	RuntimeSettingsSingleton,
	SETTING_KEYS,
)


def test_singleton():
	assert RuntimeSettingsSingleton() is RuntimeSettings


def test_defaults_loaded():
	for k in SETTING_KEYS:
		assert getattr(RuntimeSettings, k) == getattr(defaults, k)


def test_defaults_are_copied():
	RuntimeSettings.LDAP_USER_FIELD_MAP["mail"] = "changed"
	assert defaults.LDAP_USER_FIELD_MAP["mail"] == "mail"


def test_resync_applies_overrides(settings):
	settings.AD_NORMALIZER = {"BIND_ERROR_LOCKOUT_CODE": "533"}
	RuntimeSettings.resync()
	assert RuntimeSettings.BIND_ERROR_LOCKOUT_CODE == "533"
	assert RuntimeSettings.LDAP_GROUP_FIELD == defaults.LDAP_GROUP_FIELD


def test_resync_new_uuid():
	old_uuid = RuntimeSettings.uuid
	RuntimeSettings.resync()
	assert RuntimeSettings.uuid != old_uuid


def test_unknown_keys_ignored(settings, mocker: MockerFixture):
	m_logger = mocker.patch("ad_normalizer.config.runtime.logger")
	settings.AD_NORMALIZER = {"NOT_A_SETTING": True}
	RuntimeSettings.resync()
	assert not hasattr(RuntimeSettings, "NOT_A_SETTING")
	m_logger.warning.assert_called_once()


def test_missing_setting_uses_defaults(settings):
	del settings.AD_NORMALIZER
	RuntimeSettings.resync()
	assert RuntimeSettings.BIND_ERROR_MSG_UNKNOWN == defaults.BIND_ERROR_MSG_UNKNOWN


def test_unconfigured_django_uses_defaults(mocker: MockerFixture):
	m_settings = mocker.patch("ad_normalizer.config.runtime.django_settings")
	type(m_settings).AD_NORMALIZER = mocker.PropertyMock(
		side_effect=ImproperlyConfigured
	)
	r = RuntimeSettings.get_settings(RuntimeSettings.uuid, quiet=True)
	assert r == {k: getattr(defaults, k) for k in SETTING_KEYS}

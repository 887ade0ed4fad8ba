"""Config flow for Foscam Floodlight integration."""
from __future__ import annotations

import dataclasses
import logging
from typing import Any

import voluptuous as vol

from homeassistant import config_entries
from homeassistant.core import HomeAssistant, callback
from homeassistant.data_entry_flow import FlowResult
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.aiohttp_client import async_get_clientsession
from homeassistant.helpers.selector import (
    TextSelector,
    TextSelectorConfig,
    TextSelectorType,
)

from pyfoscamfloodlight import (
    CgiFailure,
    Credentials,
    FailureKind,
    FoscamCgiClient,
    Setting,
    create_device_settings,
    floodlight_settings,
    generate_native_id,
)
from pyfoscamfloodlight.const import (
    DEFAULT_NAME,
    RESULT_ACCESS_DENIED,
    RESULT_BAD_CREDENTIALS,
)

from .const import (
    CONF_HOST,
    CONF_NAME,
    CONF_NATIVE_ID,
    CONF_PASSWORD,
    CONF_USERNAME,
    DOMAIN,
)

_LOGGER = logging.getLogger(__name__)


def schema_from_settings(settings: list[Setting]) -> vol.Schema:
    """Build a form schema from setting descriptors, using their values as defaults."""
    fields: dict[Any, Any] = {}
    for setting in settings:
        if setting.type == "boolean":
            fields[vol.Optional(setting.key, default=bool(setting.value))] = bool
            continue

        if setting.value is not None:
            key = vol.Required(setting.key, default=setting.value)
        elif setting.placeholder is not None:
            key = vol.Required(
                setting.key, description={"suggested_value": setting.placeholder}
            )
        else:
            key = vol.Required(setting.key)

        if setting.type == "password":
            fields[key] = TextSelector(
                TextSelectorConfig(type=TextSelectorType.PASSWORD)
            )
        else:
            fields[key] = str
    return vol.Schema(fields)


def user_schema(user_input: dict[str, Any] | None = None) -> vol.Schema:
    """Return the schema of the initial setup form."""
    values = user_input or {}
    create_settings = [
        dataclasses.replace(setting, value=values.get(setting.key))
        for setting in create_device_settings()
    ]
    return schema_from_settings([*create_settings, *floodlight_settings(values)])


async def validate_input(hass: HomeAssistant, data: dict[str, Any]) -> dict[str, Any]:
    """Validate the user input allows us to read the light state."""
    client = FoscamCgiClient(async_get_clientsession(hass))
    credentials = Credentials(
        host=data[CONF_HOST], username=data[CONF_USERNAME], password=data[CONF_PASSWORD]
    )

    result = await client.get_white_light_brightness(credentials)
    if isinstance(result, CgiFailure):
        if result.kind is FailureKind.MALFORMED:
            raise InvalidDevice(str(result))
        if result.code in (RESULT_BAD_CREDENTIALS, RESULT_ACCESS_DENIED):
            raise InvalidAuth(str(result))
        raise CannotConnect(str(result))

    return {"title": data.get(CONF_NAME) or DEFAULT_NAME}


class ConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Foscam Floodlight."""

    VERSION = 1

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> FlowResult:
        """Handle the initial step."""
        if user_input is None:
            return self.async_show_form(step_id="user", data_schema=user_schema())

        errors = {}

        self._async_abort_entries_match({CONF_HOST: user_input[CONF_HOST]})

        try:
            info = await validate_input(self.hass, user_input)
        except CannotConnect:
            errors["base"] = "cannot_connect"
        except InvalidAuth:
            errors["base"] = "invalid_auth"
        except InvalidDevice:
            errors["base"] = "invalid_device"
        except Exception:  # pylint: disable=broad-except
            _LOGGER.exception("Unexpected exception")
            errors["base"] = "unknown"
        else:
            native_id = generate_native_id()
            await self.async_set_unique_id(native_id)
            self._abort_if_unique_id_configured()

            data = {key: value for key, value in user_input.items() if key != CONF_NAME}
            data[CONF_NATIVE_ID] = native_id
            return self.async_create_entry(title=info["title"], data=data)

        return self.async_show_form(
            step_id="user", data_schema=user_schema(user_input), errors=errors
        )

    @staticmethod
    @callback
    def async_get_options_flow(
        config_entry: config_entries.ConfigEntry,
    ) -> OptionsFlowHandler:
        """Get the options flow for this handler."""
        return OptionsFlowHandler()


class OptionsFlowHandler(config_entries.OptionsFlow):
    """Edit the settings of a Foscam floodlight."""

    async def async_step_init(
        self, user_input: dict[str, Any] | None = None
    ) -> FlowResult:
        """Manage the options."""
        coordinator = self.hass.data.get(DOMAIN, {}).get(self.config_entry.entry_id)
        if coordinator is None:
            return self.async_abort(reason="not_loaded")
        device = coordinator.device

        if user_input is not None:
            for setting in device.get_settings():
                if setting.key in user_input and user_input[setting.key] != setting.value:
                    await device.async_put_setting(setting.key, user_input[setting.key])
            return self.async_create_entry(title="", data=dict(self.config_entry.options))

        return self.async_show_form(
            step_id="init", data_schema=schema_from_settings(device.get_settings())
        )


class CannotConnect(HomeAssistantError):
    """Error to indicate we cannot connect."""


class InvalidAuth(HomeAssistantError):
    """Error to indicate the floodlight rejected the credentials."""


class InvalidDevice(HomeAssistantError):
    """Error to indicate the device is not a Foscam floodlight."""

"""
Connection parameters for the Bmob REST API, taken from keyword
arguments, environment variables and a config file, in that order.

The config file is json (or yaml, if pyyaml is installed), with one
section per application::

    {
        "default": {"application_id": "...", "api_key": "..."},
        "admin": {"inherits": "default", "master_key": "..."}
    }
"""

import json
import logging
import os

from bmob.protocol.constants import HOST

log = logging.getLogger("bmob")

#: connection parameter -> environment variable
CONNKEYS = {
    "application_id": "BMOB_APPLICATION_ID",
    "api_key": "BMOB_REST_API_KEY",
    "master_key": "BMOB_MASTER_KEY",
    "session_token": "BMOB_SESSION_TOKEN",
    "host": "BMOB_HOST",
}


def config_section(config, section="default"):
    if section in config and "inherits" in config[section]:
        ret = config_section(config, config[section]["inherits"])
    else:
        ret = {}
    if section in config:
        ret.update(config[section])
    ret.pop("inherits", None)
    return ret


def read_config(fn):
    if not fn:
        cfgdir = f"{os.environ.get('HOME', '/')}/.config/"
        for config_file in (
            f"{cfgdir}/bmob/bmob.conf",
            f"{cfgdir}/bmob/bmob.yaml",
            f"{cfgdir}/bmob/bmob.json",
            "/etc/bmob/bmob.conf",
        ):
            cfg = read_config(config_file)
            if cfg:
                return cfg
        return None

    try:
        try:
            with open(fn, "rb") as config_file:
                return json.load(config_file)
        except json.decoder.JSONDecodeError:
            ## Late import, wrapped in try/except.  yaml is external module,
            ## and not included in the requirements as for now.
            try:
                import yaml

                try:
                    with open(fn, "rb") as config_file:
                        return yaml.load(config_file, yaml.SafeLoader)
                except yaml.YAMLError:
                    log.error(
                        f"config file {fn} exists but is neither valid json nor yaml.  Check the syntax."
                    )
            except ImportError:
                log.error(
                    f"config file {fn} exists but is not valid json, and pyyaml is not installed."
                )

    except FileNotFoundError:
        log.info("no config file found")
    except ValueError:
        log.error("error in config file.  It will be ignored", exc_info=True)
    return {}


def get_connection_params(
    check_config_file=True,
    config_file=None,
    config_section_name="default",
    environment=True,
    **explicit,
):
    """
    Collect application_id, api_key, master_key, session_token and host.

    Explicit keyword arguments win over environment variables, which win
    over the config file.  Returns None if no application_id could be
    found anywhere.
    """
    params = {}
    if check_config_file:
        cfg = read_config(config_file)
        if cfg:
            section = config_section(cfg, config_section_name)
            params.update({k: v for k, v in section.items() if k in CONNKEYS})
    if environment:
        for key, var in CONNKEYS.items():
            if os.environ.get(var):
                params[key] = os.environ[var]
    params.update({k: v for k, v in explicit.items() if v is not None})

    if not params.get("application_id"):
        log.debug("no application_id found in arguments, environment or config")
        return None
    params.setdefault("host", HOST)
    return params

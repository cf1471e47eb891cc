"""
Configuration file reading for get_davclient.

The config file is a JSON (or, if PyYAML is installed, YAML) document
with one dict per section:

    {
        "default": {
            "simpledav_url": "https://dav.example.com/remote.php/webdav/",
            "simpledav_user": "tobias",
            "simpledav_pass": "hunter2"
        },
        "work": {
            "inherits": "default",
            "simpledav_url": "https://dav.example.org/"
        }
    }
"""

import json
import logging
import os

log = logging.getLogger(__name__)


def config_section(config, section="default"):
    """Returns the section, with settings from "inherits"-sections merged in"""
    if section in config and "inherits" in config[section]:
        ret = config_section(config, config[section]["inherits"])
    else:
        ret = {}
    if section in config:
        ret.update(config[section])
    return ret


def read_config(fn):
    if not fn:
        cfgdir = f"{os.environ.get('HOME', '/')}/.config"
        for config_file in (
            f"{cfgdir}/simpledav/config.json",
            f"{cfgdir}/simpledav/config.yaml",
            "/etc/simpledav/config.json",
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
            ## Late import, yaml is not among the requirements
            try:
                import yaml

                try:
                    with open(fn, "rb") as config_file:
                        return yaml.safe_load(config_file)
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

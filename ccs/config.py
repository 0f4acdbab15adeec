# SPDX-License-Identifier: Apache-2.0
#
# The OpenSearch Contributors require contributions made to
# this file be licensed under the Apache-2.0 license or a
# compatible open source license.
# Modifications Copyright OpenSearch Contributors. See
# GitHub history for details.
# Licensed to Elasticsearch B.V. under one or more contributor
# license agreements. See the NOTICE file distributed with
# this work for additional information regarding copyright
# ownership. Elasticsearch B.V. licenses this file to you under
# the Apache License, Version 2.0 (the "License"); you may
# not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#	http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing,
# software distributed under the License is distributed on an
# "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY
# KIND, either express or implied.  See the License for the
# specific language governing permissions and limitations
# under the License.

import configparser
import logging
import os
from enum import Enum

from ccs import exceptions, paths
from ccs.utils import convert


class Scope(Enum):
    # Values read from the packaged defaults and the user's ini file
    application = 1
    # Values set programmatically, e.g. by the request dispatcher or in tests
    applicationOverride = 2


class Config:
    """
    Configuration provider for the orchestrators. Values are looked up by section and key; overrides win over values
    from ini files.
    """
    RESOURCES_DIR_PLACEHOLDER = "${RESOURCES_DIR}"

    def __init__(self, config_file=None):
        self.logger = logging.getLogger(__name__)
        self.config_file = config_file
        self._opts = {}

    def add(self, scope, section, key, value):
        self._opts[self._k(scope, section, key)] = value

    def opts(self, section, key, default_value=None, mandatory=True):
        """
        Resolves a configuration property.

        :param section: The configuration section.
        :param key: The configuration key.
        :param default_value: The default value to use for optional properties as a fallback. Default: None
        :param mandatory: Whether a value is expected to exist for the given section and key. Note that the default_value is ignored for
        mandatory properties. It must be ok to use the default_value for optional properties. Default: True
        :return: The configuration property.
        """
        try:
            scope = self._resolve_scope(section, key)
            return self._opts[self._k(scope, section, key)]
        except KeyError:
            if not mandatory:
                return default_value
            raise exceptions.ConfigError(f"No value for mandatory configuration: section=[{section}], key=[{key}]")

    def load_config(self):
        """
        Loads the packaged defaults and then the user supplied ini file (if any) into the application scope.
        """
        self._load_file(paths.default_config_file())
        if self.config_file:
            if not os.path.isfile(self.config_file):
                raise exceptions.ConfigError(f"Config file [{self.config_file}] does not exist.")
            self._load_file(self.config_file)
        return self

    def _load_file(self, config_file):
        self.logger.debug("Loading configuration from [%s].", config_file)
        parser = configparser.ConfigParser(interpolation=None)
        try:
            parser.read(config_file, encoding="utf-8")
        except configparser.Error as e:
            raise exceptions.ConfigError(f"Cannot parse config file [{config_file}]", e)
        for section in parser.sections():
            for key, value in parser.items(section):
                self.add(Scope.application, section, key, value.replace(Config.RESOURCES_DIR_PLACEHOLDER, paths.resources_root()))

    def _resolve_scope(self, section, key):
        """
        Resolves the scope with the highest priority for which a value exists for the given section and key.
        """
        for scope in reversed(list(Scope)):
            if self._k(scope, section, key) in self._opts:
                return scope
        return None

    def _k(self, scope, section, key):
        if scope is None:
            return None
        return scope, section, key


def setting(cfg, section, key):
    """
    Resolves a mandatory string setting for which an empty value means "not configured".
    """
    value = cfg.opts(section, key, mandatory=False)
    if value is None or not str(value).strip():
        raise exceptions.ConfigError(f"Setting [{section}] [{key}] is empty. An administrator has not configured it yet.")
    return str(value).strip()


def int_setting(cfg, section, key, default_value):
    value = cfg.opts(section, key, default_value=default_value, mandatory=False)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise exceptions.ConfigError(f"Setting [{section}] [{key}] must be an integer but was [{value}].") from None


def float_setting(cfg, section, key, default_value):
    value = cfg.opts(section, key, default_value=default_value, mandatory=False)
    try:
        return float(value)
    except (TypeError, ValueError):
        raise exceptions.ConfigError(f"Setting [{section}] [{key}] must be a number but was [{value}].") from None


def bool_setting(cfg, section, key, default_value):
    value = cfg.opts(section, key, default_value=default_value, mandatory=False)
    try:
        return convert.to_bool(value)
    except ValueError:
        raise exceptions.ConfigError(f"Setting [{section}] [{key}] must be a boolean but was [{value}].") from None

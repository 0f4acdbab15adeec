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

import json
import logging
import logging.config
import os

from ccs import paths

LOG_PATH_PLACEHOLDER = "${LOG_PATH}"


def default_log_config_file():
    return os.path.join(paths.resources_root(), "logging.json")


def configure_logging(log_config_file=None):
    """
    Configures logging from a ``logging.config.dictConfig`` document. File handlers may use ``${LOG_PATH}`` in their
    file name; the directory is created if necessary.

    :param log_config_file: Path of the logging configuration. Defaults to the packaged configuration.
    """
    with open(log_config_file or default_log_config_file(), "rt", encoding="utf-8") as f:
        log_config = json.load(f)

    for handler in log_config.get("handlers", {}).values():
        file_name = handler.get("filename")
        if file_name and LOG_PATH_PLACEHOLDER in file_name:
            handler["filename"] = file_name.replace(LOG_PATH_PLACEHOLDER, paths.logs())
            os.makedirs(os.path.dirname(handler["filename"]), exist_ok=True)

    logging.config.dictConfig(log_config)
    logging.captureWarnings(True)

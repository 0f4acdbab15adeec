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

import os

from ccs import PROGRAM_NAME


def ccs_confdir():
    default_home = os.path.expanduser("~")
    return os.path.join(os.getenv("CCS_HOME", default_home), f".{PROGRAM_NAME}")


def ccs_root():
    return os.path.dirname(os.path.realpath(__file__))


def resources_root():
    return os.path.join(ccs_root(), "resources")


def default_config_file():
    return os.path.join(resources_root(), "ccs.ini")


def logs():
    """
    :return: The absolute path to the directory that contains the service's log file.
    """
    return os.path.join(ccs_confdir(), "logs")

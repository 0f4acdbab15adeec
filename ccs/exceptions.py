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


class CcsError(Exception):
    """
    Base class for all container cluster service exceptions
    """

    def __init__(self, message, cause=None):
        super().__init__(message, cause)
        self.message = message
        self.cause = cause

    def __repr__(self):
        return self.message

    def __str__(self):
        return self.message


class ConfigError(CcsError):
    """
    Thrown when a required setting is missing or invalid. Never retried.
    """


class InvalidSyntax(CcsError):
    pass


class ValidationError(CcsError):
    """
    Thrown when a request references something that does not exist or is not usable, e.g. an unknown network or key pair
    """


class NotFound(ValidationError):
    pass


class PermissionDenied(CcsError):
    pass


class CapacityError(CcsError):
    """
    Thrown when there is not enough capacity to place or start an instance
    """


class ResourceUnavailableError(CcsError):
    """
    Thrown when a resource required by an operation is temporarily unavailable
    """


class ConflictError(CcsError):
    """
    Thrown on concurrent modification of a resource or on conflicting network rules
    """


class InfraOperationError(CcsError):
    """
    Thrown whenever a network, firewall or port forwarding operation fails
    """


class ProvisioningError(CcsError):
    """
    Thrown when an instance could not be provisioned for any other reason, e.g. it is not running after it was started
    """


class ReadinessTimeoutError(CcsError):
    pass


class PartialTeardownError(CcsError):
    """
    Describes a teardown where one or more destructive steps failed. The cluster is left in the Deleting state.
    """


class IllegalStateTransition(CcsError):
    pass

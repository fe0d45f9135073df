# Copyright 2025 DataStax Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except
# in compliance with the License. You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express
# or implied. See the License for the specific language governing permissions and limitations under
# the License.

"""Errors raised by the Tolstoy client itself.

Failures from the server or the network are not wrapped: they surface as
``tolstoy_api.UnexpectedStatus`` or ``httpx.HTTPError`` exactly as the
generated API layer raises them.
"""


class TolstoyClientError(Exception):
    """Base class for errors raised by the Tolstoy client."""


class ConfigurationError(TolstoyClientError):
    """The client was constructed with missing or inconsistent settings."""

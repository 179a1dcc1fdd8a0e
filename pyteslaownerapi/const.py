#  SPDX-License-Identifier: Apache-2.0
"""Constants for the Tesla owner API."""

API_BASE_URL = "https://owner-api.teslamotors.com"
MOCK_BASE_URL = "http://private-623898-modelsapi.apiary-mock.com"

CLIENT_ID = "e4a9949fcfa04068f59abb5a658f2bac0a3428e4652315490b659d5ab3f35a9e"
CLIENT_SECRET = "c75f14bbadc8bee3a7594412c31416f8300256d7668ea7e6e7f06727bfb9d220"
GRANT_TYPE = "password"

USER_AGENT = "pyteslaownerapi/0.1.0"
TIMEOUT = 90

#: key the API nests its payloads under
RESPONSE_KEY = "response"

#: seconds before expiry at which a token is no longer used
TOKEN_LEEWAY = 60

#: body fields and query parameters that are masked in debug logs
SECRET_FIELDS = ("password", "client_secret", "access_token")

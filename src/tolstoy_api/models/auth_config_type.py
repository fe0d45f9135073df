from enum import Enum


class AuthConfigType(str, Enum):
    API_KEY = "apiKey"
    OAUTH2 = "oauth2"

    def __str__(self) -> str:
        return str(self.value)

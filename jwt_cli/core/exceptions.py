"""
Custom exceptions
"""


class JWTToolError(Exception):
    """Base class for every failure reported to the user"""
    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)
        self.message = message


class MalformedTokenError(JWTToolError):
    """Token is not three valid base64url/JSON segments"""
    def __init__(self, message: str = "Malformed token"):
        super().__init__(message)


class UnknownAlgorithmError(JWTToolError):
    """Algorithm identifier cannot be resolved or is not allowed"""
    def __init__(self, message: str = "Unknown signing algorithm"):
        super().__init__(message)


class SignatureMismatchError(JWTToolError):
    """Recomputed signature does not match the token's signature"""
    def __init__(self, message: str = "Signature verification failed"):
        super().__init__(message)


class ClaimsNotJSONError(JWTToolError):
    """Claims argument is not a JSON object"""
    def __init__(self, message: str = "Couldn't parse claims JSON"):
        super().__init__(message)


class SigningFailureError(JWTToolError):
    """Signing primitive rejected the key or claims"""
    def __init__(self, message: str = "Signing failed"):
        super().__init__(message)


class SerializationError(JWTToolError):
    """Result could not be rendered as JSON"""
    def __init__(self, message: str = "Couldn't serialize output"):
        super().__init__(message)

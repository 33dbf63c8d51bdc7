
import base64

def b64e(data: bytes) -> str:
    """Standard base64 encode with canonical ``=`` padding"""
    return base64.b64encode(bytes(data)).decode("ascii")

# -------------------------------
# Endpoint
# -------------------------------
TRANSLATE_ENDPOINT = "https://translate.googleapis.com/translate_a/single"
CLIENT_ID = "gtx"

# bd = dictionary, t = sentences, at = alternative translations
DATA_TYPES = ("bd", "t", "at")

# -------------------------------
# Request
# -------------------------------
REQUEST_TIMEOUT = 15  # seconds, None disables

# -------------------------------
# Response
# -------------------------------
BAD_REQUEST_MARKER = b"<title>Error 400 (Bad Request)"

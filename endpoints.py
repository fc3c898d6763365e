# Routes of the file-manage backend; update if the server layout changes.

BASE_URL = "http://localhost:8080"

CREDENTIAL_COOKIE = "PASSWORD"

LOGIN_ROUTE = "/login"

FILES = {
    "list": {
        "method": "GET",
        "path": "/api/files",
    },
    "delete": {
        "method": "DELETE",
        "path": "/api/files/{key}",
    },
}

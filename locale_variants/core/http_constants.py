"""Constantes HTTP pour éviter les valeurs magiques dans le code.

Ce module définit les codes de statut HTTP utilisés par l'API de variantes et les valeurs par
défaut des clients HTTP sortants (fournisseurs de traduction).
"""

# Codes de statut HTTP courants
HTTP_OK = 200
HTTP_CREATED = 201
HTTP_NO_CONTENT = 204
HTTP_BAD_REQUEST = 400
HTTP_NOT_FOUND = 404
HTTP_CONFLICT = 409
HTTP_INTERNAL_SERVER_ERROR = 500
HTTP_BAD_GATEWAY = 502

# Clients HTTP sortants
DEFAULT_CONNECT_TIMEOUT = 5.0
MAX_KEEPALIVE_CONNECTIONS = 20
MAX_CONNECTIONS = 50

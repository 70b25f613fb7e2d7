"""Application-level constants."""

# Keys of the example site document
SITE_HOSTS_KEY = "hosts"
SITE_SERVICES_KEY = "services"

# Keys of a service entry
SERVICE_NAME_KEY = "name"
SERVICE_PORT_KEY = "port"
SERVICE_ROUTES_KEY = "routes"
SERVICE_TLS_KEY = "tls"

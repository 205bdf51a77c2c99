# This file marks the HTTP layer package: app factory, config, routers, services, and schemas.
# Import `create_app` from `union_cms.api.app`; `union_cms.api.main` holds the ASGI instance.

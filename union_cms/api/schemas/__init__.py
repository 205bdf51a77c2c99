# This file marks the schemas package for request and response models.
# Request models type-check inbound bodies once at the API boundary.
# Response models pin the `{success, message, data}` envelope for each endpoint.

# This file marks the services package for resource business logic modules.
# It exists so routers can depend on cohesive service classes instead of raw SQL.
# Services validate input and raise API errors before any write reaches the database.

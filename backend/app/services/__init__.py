"""
Booklist Backend - Services Layer
==================================

What:  Business logic between routes (HTTP) and the document store.

Service Inventory:
    - ResourceService: list / get / create / update / delete for one
      resource type; one instance per type in `resource_services`
"""

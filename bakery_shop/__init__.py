"""Bakery Shop.

Backend for a bakery-shop management application: staff create and track
customer orders, manage products and pickup locations, administer users and
read a sales dashboard.

High-level architecture
-----------------------

Requests flow through three thin layers:

- ``bakery_shop.server.api``: FastAPI routers exposing the JSON API.
- ``bakery_shop.server.services``: the ``CrudService`` hierarchy holding the
  business rules (order lifecycle, unique-name rewording, dashboard
  aggregation).
- ``bakery_shop.core.database``: SQLModel entities and async repositories
  over the relational store.

Typical workflow
----------------

1. Create a new order for the signed-in user (state ``NEW``).
2. Fill in customer, pickup location, due date/time and items.
3. Move the order through its states, adding comments to its history.
4. Read the dashboard to see deliveries and sales per day, month and product.
"""

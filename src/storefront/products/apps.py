from django.apps import AppConfig


class ProductsConfig(AppConfig):
    name = "storefront.products"
    label = "products"

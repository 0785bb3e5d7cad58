from django.apps import AppConfig


class PhonesConfig(AppConfig):
    name = "modules.phones"
    label = "phones"

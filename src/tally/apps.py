from django.apps import AppConfig


class TallyConfig(AppConfig):
    name = "tally"

    def ready(self):
        from tally import default_settings, checks  # noqa
        from django.conf import settings

        for name in dir(default_settings):
            if name.isupper() and not hasattr(settings, name):
                setattr(settings, name, getattr(default_settings, name))

from django.conf import settings
from django.core.management.commands.runserver import Command as BaseRunserverCommand
from django.core.servers.basehttp import WSGIRequestHandler


class Command(BaseRunserverCommand):
    help = (
        "Serve the API on 0.0.0.0:$PORT, one request at a time, with a "
        "socket read timeout on every connection."
    )

    default_addr = "0.0.0.0"
    default_port = str(settings.PORT)

    def add_arguments(self, parser):
        super().add_arguments(parser)
        parser.add_argument(
            "--threading",
            action="store_true",
            dest="use_threading",
            help="Handle requests in threads (the store lock still serialises writes).",
        )
        parser.set_defaults(use_threading=False)

    def handle(self, *args, **options):
        # Applied to each accepted socket; a stalled body read then fails
        # instead of blocking the single worker forever.
        WSGIRequestHandler.timeout = settings.REQUEST_READ_TIMEOUT
        super().handle(*args, **options)

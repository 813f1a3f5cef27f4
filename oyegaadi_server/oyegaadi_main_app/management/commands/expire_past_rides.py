"""Management command to resolve rides whose departure date has passed

Deploy it next to the web process as ``python manage.py expire_past_rides --loop``.
The loop sweeps once as soon as it starts, so rides that expired while the
server was down are resolved at startup, then again every --interval seconds.
"""
import time

from django.conf import settings
from django.core.management.base import BaseCommand
from oyegaadi_main_app.services import RideService


class Command(BaseCommand):
    help = 'Complete past rides with confirmed bookings and cancel the rest'

    def add_arguments(self, parser):
        parser.add_argument('--loop', action='store_true', help='Keep running, sweeping every --interval seconds')
        parser.add_argument(
            '--interval',
            type=int,
            default=settings.RIDE_SWEEP_INTERVAL_SECONDS,
            help=f'Seconds between sweeps when looping (default: {settings.RIDE_SWEEP_INTERVAL_SECONDS})',
        )

    def handle(self, *args, **options):
        service = RideService()
        if not options['loop']:
            self._sweep(service)
            return

        self.stdout.write(f"Sweeping expired rides every {options['interval']}s (Ctrl+C to stop)")
        try:
            while True:
                self._sweep(service)
                time.sleep(options['interval'])
        except KeyboardInterrupt:
            self.stdout.write('Stopped')

    def _sweep(self, service):
        result = service.sweep_expired()
        if result['processed'] == 0:
            self.stdout.write('No expired rides')
            return
        self.stdout.write(self.style.SUCCESS(
            f"Processed {result['processed']} ride(s): "
            f"{result['completed']} completed, {result['cancelled']} cancelled"
        ))

from django.core.management.base import BaseCommand
from messaging.services.matchmaking import matchmaking_service


class Command(BaseCommand):
    help = "Remove stale queue entries, ended sessions and old signaling messages"

    def handle(self, *args, **kwargs):
        self.stdout.write("Cleaning up matchmaking data...")
        result = matchmaking_service.cleanup()

        self.stdout.write(f"  Queue entries removed: {result['queue_entries']}")
        self.stdout.write(f"  Ended sessions removed: {result['sessions']}")
        self.stdout.write(f"  Signaling messages removed: {result['signaling_messages']}")
        self.stdout.write(self.style.SUCCESS("Matchmaking cleanup complete"))

"""Load the storefront's sample events into the catalog."""

from datetime import date, time
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from catalog.models import Event, TicketType

SAMPLE_EVENTS = [
    {
        "title": "Summer Music Festival",
        "description": "Experience three days of amazing live performances from top artists across multiple stages.",
        "category": "Music",
        "date": date(2023, 6, 15),
        "start_time": time(12, 0),
        "end_time": time(23, 0),
        "location": "Central Park, New York",
        "organizer": "Melody Productions",
        "total_tickets": 2500,
        "ticket_types": [
            ("general", "General Admission", "149.99", "Access to all general venues and performances"),
            ("vip", "VIP Pass", "299.99", "Premium viewing areas, exclusive lounges, and complimentary refreshments"),
            ("weekend", "Weekend Pass", "399.99", "Full weekend access with camping option included"),
        ],
    },
    {
        "title": "Tech Conference 2023",
        "description": "Join industry leaders and innovators for a two-day conference on the future of technology.",
        "category": "Technology",
        "date": date(2023, 8, 10),
        "start_time": time(9, 0),
        "end_time": time(17, 0),
        "location": "Convention Center, San Francisco",
        "organizer": "FutureTech Inc.",
        "total_tickets": 1000,
        "ticket_types": [
            ("standard", "Standard Pass", "299.99", "Access to all sessions and exhibitions"),
            ("premium", "Premium Pass", "499.99", "Standard access plus workshop participation and exclusive networking events"),
            ("executive", "Executive Pass", "799.99", "All-inclusive access with private meetings with speakers and industry leaders"),
        ],
    },
    {
        "title": "Food & Wine Festival",
        "description": "Taste exceptional dishes and wines from renowned chefs and wineries around the world.",
        "category": "Food",
        "date": date(2023, 9, 5),
        "start_time": time(11, 0),
        "end_time": time(21, 0),
        "location": "Marina Bay, Singapore",
        "organizer": "Global Culinary Arts",
        "total_tickets": 1500,
        "ticket_types": [
            ("tasting", "Tasting Pass", "89.99", "Entry with 10 food and 5 wine tasting tokens"),
            ("gourmet", "Gourmet Pass", "149.99", "Entry with 20 food and 10 wine tasting tokens plus exclusive tastings"),
            ("chefs-table", "Chef's Table Experience", "249.99", "Limited seating at special chef-hosted dining experiences plus full festival access"),
        ],
    },
    {
        "title": "Art Exhibition: Modern Perspectives",
        "description": "Explore contemporary works from emerging and established artists pushing boundaries.",
        "category": "Art",
        "date": date(2023, 10, 22),
        "start_time": time(10, 0),
        "end_time": time(18, 0),
        "location": "National Gallery, London",
        "organizer": "Contemporary Art Foundation",
        "total_tickets": 800,
        "ticket_types": [
            ("standard", "Standard Entry", "24.99", "Exhibition access with digital program"),
            ("premium", "Premium Entry", "39.99", "Exhibition access with audio guide and exhibition catalog"),
            ("guided-tour", "Guided Tour", "49.99", "Exhibition access with expert-led tour in small groups"),
        ],
    },
    {
        "title": "Marathon City Run",
        "description": "Join thousands of runners in this scenic marathon through the heart of the city.",
        "category": "Sports",
        "date": date(2023, 11, 12),
        "start_time": time(7, 0),
        "end_time": time(14, 0),
        "location": "Downtown, Chicago",
        "organizer": "Chicago Athletics Association",
        "total_tickets": 5000,
        "ticket_types": [
            ("standard", "Standard Entry", "75.00", "Race entry with timing chip, t-shirt, and finisher's medal"),
            ("premium", "Premium Package", "120.00", "Race entry with premium gear pack and priority starting position"),
            ("charity", "Charity Entry", "200.00", "Race entry with donation to local community programs and special recognition"),
        ],
    },
    {
        "title": "Comedy Night Special",
        "description": "Laugh until your sides hurt with performances from top stand-up comedians.",
        "category": "Entertainment",
        "date": date(2023, 12, 3),
        "start_time": time(20, 0),
        "end_time": time(23, 0),
        "location": "Comedy Club, Los Angeles",
        "organizer": "Laugh Factory Productions",
        "total_tickets": 200,
        "ticket_types": [
            ("general", "General Seating", "49.99", "Standard seating with one drink included"),
            ("premium", "Premium Seating", "79.99", "Front section seating with two drinks included"),
            ("vip", "VIP Experience", "129.99", "Best seats in the house, drink package, and meet & greet with performers"),
        ],
    },
]


class Command(BaseCommand):
    help = "Load the sample events and ticket types into the catalog"

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete events that have no bookings before loading",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["reset"]:
            _, per_model = Event.objects.filter(bookings__isnull=True).delete()
            removed = per_model.get("catalog.Event", 0)
            self.stdout.write(f"Deleted {removed} events without bookings")

        created = 0
        for sample in SAMPLE_EVENTS:
            fields = {k: v for k, v in sample.items() if k != "ticket_types"}
            event, was_created = Event.objects.get_or_create(
                title=fields.pop("title"), defaults=fields
            )
            if not was_created:
                continue
            created += 1
            for position, (code, name, price, description) in enumerate(
                sample["ticket_types"]
            ):
                TicketType.objects.create(
                    event=event,
                    code=code,
                    name=name,
                    price=Decimal(price),
                    description=description,
                    position=position,
                )

        self.stdout.write(
            self.style.SUCCESS(f"Seeded {created} of {len(SAMPLE_EVENTS)} events")
        )

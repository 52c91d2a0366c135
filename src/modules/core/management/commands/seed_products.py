from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.core.exceptions import CatalogError
from modules.products.dtos import CreateProductDTO
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

SEED_PRODUCTS = [
    ("Mechanical Keyboard", "87-key tenkeyless, brown switches", "Kim Minji"),
    ("Wireless Mouse", "2.4GHz receiver, 3 DPI levels", "Lee Junho"),
    ("USB-C Hub", "7-in-1 with HDMI and SD card reader", "Park Seoyeon"),
    ("27-inch Monitor", "QHD IPS panel, 75Hz", "Choi Hyunwoo"),
    ("Laptop Stand", "Aluminium, height adjustable", "Jung Yuna"),
]


class Command(BaseCommand):
    help = "Seed the catalog with demo products (existing names are skipped)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--password",
            default="seed1234!",
            help="Password assigned to every seeded product.",
        )

    def handle(self, *args, **options):
        service = ProductService(repository=ProductDjangoRepository())
        created = skipped = 0

        for name, description, manager in SEED_PRODUCTS:
            dto = CreateProductDTO(
                name=name,
                description=description,
                manager=manager,
                password=options["password"],
            )
            try:
                service.create_product(dto)
            except CatalogError:
                skipped += 1
                continue
            created += 1

        self.stdout.write(
            self.style.SUCCESS(f"Seed completed: created={created}, skipped={skipped}")
        )

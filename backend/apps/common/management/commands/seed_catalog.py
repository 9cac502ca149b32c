from django.conf import settings
from django.core.management.base import BaseCommand

from apps.carts.container import build_cart_service
from apps.catalog.mappers import ProductMapper
from apps.catalog.repositories import ProductRepository

# (id, name, price, description, image, category)
PRODUCTS = [
    (
        1,
        "Fjallraven - Foldsack No. 1 Backpack, Fits 15 Laptops",
        109.95,
        "Your perfect pack for everyday use and walks in the forest. Stash your laptop (up to 15 inches) in the padded sleeve, your everyday",
        "https://fakestoreapi.com/img/81fPKd-2AYL._AC_SL1500_t.png",
        "men's clothing",
    ),
    (
        2,
        "Mens Cotton Jacket",
        55.99,
        "Great outerwear jackets for Spring/Autumn/Winter, suitable for many occasions, such as working, hiking, camping, mountain/rock climbing, cycling, traveling or other outdoors.",
        "https://fakestoreapi.com/img/71li-ujtlUL._AC_UX679_t.png",
        "men's clothing",
    ),
    (
        3,
        "Solid Gold Petite Micropave",
        168.00,
        "Satisfaction Guaranteed. Return or exchange any order within 30 days. Designed and sold by Hafeez Center in the United States.",
        "https://fakestoreapi.com/img/61sbMiUnoGL._AC_UL640_QL65_ML3_t.png",
        "jewelery",
    ),
    (
        4,
        "White Gold Plated Princess",
        9.99,
        "Classic Created Wedding Engagement Solitaire Diamond Promise Ring for Her. Gifts to spoil your love more for Engagement, Wedding, Anniversary, Valentine's Day...",
        "https://fakestoreapi.com/img/71YAIFU48IL._AC_UL640_QL65_ML3_t.png",
        "jewelery",
    ),
    (
        5,
        "WD 2TB Elements Portable External Hard Drive - USB 3.0",
        64.00,
        "USB 3.0 and USB 2.0 Compatibility Fast data transfers Improve PC Performance High Capacity; Compatibility Formatted NTFS for Windows 10, Windows 8.1, Windows 7.",
        "https://fakestoreapi.com/img/61IBBVJvSDL._AC_SY879_t.png",
        "electronics",
    ),
    (
        6,
        "Acer SB220Q bi 21.5 inches Full HD (1920 x 1080) IPS Ultra-Thin",
        599.00,
        "21.5 inches Full HD (1920 x 1080) widescreen IPS display and Radeon FreeSync technology. Zero-frame design, ultra-thin, 4ms response time.",
        "https://fakestoreapi.com/img/81QpkIctqPL._AC_SX679_t.png",
        "electronics",
    ),
    (
        7,
        "Lock and Love Women's Removable Hooded Faux Leather Moto Biker Jacket",
        29.95,
        "Faux leather material for style and comfort, 2 pockets of front, 2-For-One Hooded denim style faux leather jacket, button detail on waist.",
        "https://fakestoreapi.com/img/81XH0e8fefL._AC_UY879_t.png",
        "women's clothing",
    ),
    (
        8,
        "MBJ Women's Solid Short Sleeve Boat Neck V",
        9.85,
        "95% RAYON 5% SPANDEX, Lightweight fabric with great stretch for comfort, Ribbed on sleeves and neckline, Double stitching on bottom hem.",
        "https://fakestoreapi.com/img/71z3kpMAYsL._AC_UY879_t.png",
        "women's clothing",
    ),
]


class Command(BaseCommand):
    help = "Write the demo product catalog to CATALOG_PATH and optionally empty the cart."

    def add_arguments(self, parser):
        parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing non-empty catalog",
        )
        parser.add_argument(
            "--clear-cart",
            action="store_true",
            help="Also reset the cart document to an empty list",
        )

    def handle(self, *args, **options):
        catalog = ProductRepository(settings.CATALOG_PATH, fail_open=True)
        existing = catalog.list()
        if existing and not options["force"]:
            self.stdout.write(
                f"Catalog already holds {len(existing)} products at {catalog.path}; "
                "use --force to overwrite."
            )
        else:
            self.stdout.write("Seeding products...")
            entries = [
                {
                    "id": pid,
                    "name": name,
                    "price": price,
                    "description": description,
                    "image": image,
                    "category": category,
                }
                for pid, name, price, description, image, category in PRODUCTS
            ]
            # Round-trip through the mapper so seeded entries match what the API serves.
            catalog.write(
                [ProductMapper.to_raw(p) for p in ProductMapper.many_from_raw(entries)]
            )
            self.stdout.write(f"Wrote {len(entries)} products to {catalog.path}")

        if options["clear_cart"]:
            service = build_cart_service()
            service.clear_cart()
            self.stdout.write(f"Cleared cart at {service.store.path}")

        self.stdout.write(self.style.SUCCESS("Seeding complete."))

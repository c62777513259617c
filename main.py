# main.py
import logging

from src.business_objects.config import DemoConfig
from src.business_objects.seed import make_objects
from src.reporting.report import RetailReport


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # ------------------------------------------------------------
    # Configuration (defaults reproduce the fixed demo)
    # ------------------------------------------------------------
    cfg = DemoConfig(
        catalog_file=dict(path="products.txt"),
        orders=dict(default_status="New", delivery_lead_days=7),
        report=dict(top_n=3),
    )

    # ------------------------------------------------------------
    # Seed catalog, customers and orders
    # ------------------------------------------------------------
    instance = make_objects(cfg)

    print(f"Seeded {len(instance.products)} products, {len(instance.customers)} customers, "
          f"{len(instance.orders)} orders.\n")

    # ------------------------------------------------------------
    # Reports + catalog round trip
    # ------------------------------------------------------------
    RetailReport(instance=instance, cfg=cfg).run()


if __name__ == "__main__":
    main()

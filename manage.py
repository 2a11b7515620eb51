import argparse
import logging
import sys
from database import database
from database import crud

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="Inventory Kafka Bridge")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("init-db", help="Initialize database tables")

    parser_create = subparsers.add_parser("create", help="Create an inventory record")
    parser_create.add_argument("--sku", required=True, help="SKU (unique)")
    parser_create.add_argument("--name", required=True, help="Product name")
    parser_create.add_argument("-q", "--quantity", type=int, default=0, help="Quantity on hand")
    parser_create.add_argument("-w", "--warehouse", help="Warehouse")

    parser_update = subparsers.add_parser("update", help="Update an inventory record")
    parser_update.add_argument("id", type=int, help="Inventory ID")
    parser_update.add_argument("--name", help="Product name")
    parser_update.add_argument("-q", "--quantity", type=int, help="Quantity on hand")
    parser_update.add_argument("-w", "--warehouse", help="Warehouse")

    parser_delete = subparsers.add_parser("delete", help="Delete an inventory record")
    parser_delete.add_argument("id", type=int, help="Inventory ID")

    parser_list = subparsers.add_parser("list", help="List inventory records")
    parser_list.add_argument("-n", "--limit", type=int, default=100, help="Max rows")

    parser_topics = subparsers.add_parser("setup-topics", help="Create Kafka topics")
    parser_topics.add_argument("--delete", action="store_true", help="Delete the topics instead")

    subparsers.add_parser("check-kafka", help="Check the Kafka connection")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "init-db":
        database.init_db()
        print("Database initialized successfully.")
        return 0

    if args.command == "setup-topics":
        from messaging.admin.setup_topics import create_topics, delete_topics
        if args.delete:
            delete_topics()
        else:
            results = create_topics()
            if 'failed' in results.values():
                return 1
        return 0

    if args.command == "check-kafka":
        from messaging.utils.check_connection import check_connection
        return 0 if check_connection() else 1

    # Changes to inventories are published to Kafka.
    observer = None
    if args.command in ("create", "update", "delete"):
        from messaging.exceptions import KafkaHandlerError
        from observers import register_inventory_observer
        try:
            observer = register_inventory_observer()
        except KafkaHandlerError as e:
            # the database change still goes through, just unpublished
            logger.critical(f"Kafka unavailable, inventory events will not be published: {e}")

    db = database.SessionLocal()

    try:
        if args.command == "create":
            inventory = crud.create_inventory(db, {
                "sku": args.sku,
                "name": args.name,
                "quantity": args.quantity,
                "warehouse": args.warehouse,
            })
            print(f"Created {inventory}")

        elif args.command == "update":
            update_data = {
                key: value
                for key, value in (("name", args.name), ("quantity", args.quantity), ("warehouse", args.warehouse))
                if value is not None
            }
            inventory = crud.update_inventory(db, args.id, update_data)
            if inventory is None:
                print(f"Inventory {args.id} not found")
                return 1
            print(f"Updated {inventory}")

        elif args.command == "delete":
            if not crud.delete_inventory(db, args.id):
                print(f"Inventory {args.id} not found")
                return 1
            print(f"Deleted inventory {args.id}")

        elif args.command == "list":
            for inventory in crud.get_inventories(db, limit=args.limit):
                print(inventory)

    except Exception as e:
        logger.error(f"Error executing command: {e}")
        return 1
    finally:
        db.close()
        if observer is not None:
            observer.unregister()

    return 0


# Initialize tables
# python manage.py init-db

# Create / change inventories (each change is published to the inventories topic)
# python manage.py create --sku SKU-001 --name "Desk" -q 10
# python manage.py update 1 -q 7
# python manage.py delete 1

if __name__ == "__main__":
    sys.exit(main())

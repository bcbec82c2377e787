"""
Sample program: create, read, update and delete one task.

Usage: python -m docstore.main [config.json]
"""

import logging
import sys
from datetime import datetime, timezone

from .config import Config
from .db.mongodb import MongoCrud, connect_from_config
from .exceptions import DatabaseConnectionError, OperationError
from .models import InsertableTask, Task
from .utils import serialize_mongo_document


def run(crud: MongoCrud, title: str = "Pay AmeX bill") -> int:
    """Walk one task through the four CRUD operations. Returns a process exit code."""
    due = datetime(2020, 4, 28, 12, 0, 9, tzinfo=timezone.utc)

    task = InsertableTask(title=title, category="Bill", due_date=due, completed=False)
    inserted_id = crud.create(task.to_document())
    logging.info(f"Inserted document id: {inserted_id}")

    doc = crud.read({"title": title})
    if doc is None:
        logging.error(f"Inserted task '{title}' could not be read back")
        return 1
    logging.info(f"Document retrieved: {serialize_mongo_document(doc)}")

    stored = Task.from_document(doc)
    update = stored.to_insertable().model_copy(update={"completed": True})
    updated = crud.update({"title": title}, update.to_document())
    if updated is None:
        logging.warning("Update was not acknowledged; modified count unknown")
    else:
        logging.info(f"Number of documents updated: {updated}")

    deleted = crud.delete({"title": title})
    logging.info(f"Number of documents deleted: {deleted}")
    return 0


def main() -> int:
    """
    Main entry point - optional first argument is the path to a JSON config file
    """
    config_file = sys.argv[1] if len(sys.argv) > 1 else ""
    Config.initialize(config_file)
    logging.basicConfig(level=Config.log_level(), format="%(asctime)s %(levelname)s %(message)s")

    _, db_name, collection = Config.get_db_params()
    try:
        connection = connect_from_config()
    except DatabaseConnectionError as e:
        logging.error(f"Could not connect: {e}")
        return 1

    with connection:
        crud = MongoCrud(db_name, collection, connection)
        try:
            return run(crud)
        except OperationError as e:
            logging.error(f"{e.operation} failed: {e}")
            return 1


if __name__ == "__main__":
    sys.exit(main())

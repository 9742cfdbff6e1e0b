from grocery.cli.menu import ConsoleMenu
from grocery.domain.Catalog import Catalog
from grocery.infra.Catalog_Repository import CatalogRepository
from grocery.utilities.config import configure_logging


def main():
    configure_logging()
    menu = ConsoleMenu(Catalog(), CatalogRepository())
    try:
        menu.run()
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye!")


if __name__ == "__main__":
    main()

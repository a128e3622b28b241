"""Example: render the week grid through the service layer (no Flask).

Controllers stay thin; the grid logic lives in the services.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.staff_portal.staff_portal.container import build_container
from src.staff_portal.staff_portal.core.enums import DisplayTimezone


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)
    shifts = container.schedules_repo.list_shifts()

    grid = container.schedule_grid_service.build_week(shifts, date.today(), DisplayTimezone.REMOTE)
    print("Time".ljust(14), *(d.label.ljust(10) for d in grid.days))
    for row, cells in zip(grid.rows, grid.cells):
        print(row.label.ljust(14), *((name or "-").ljust(10) for name in cells))


if __name__ == "__main__":
    main()

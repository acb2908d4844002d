"""Interactive text menu for the parking lot."""

import logging
import sys
from typing import Optional, TextIO

from ..state.errors import RegistryError
from ..state.models import SpotStatus
from ..state.spot_registry import SpotRegistry

logger = logging.getLogger(__name__)

MENU_OPTIONS = [
    "Park car in next available spot",
    "Park car in specific spot",
    "Remove car from spot",
    "List all spots",
    "Find nearest available spot",
    "Reserve a spot in advance",
    "Cancel a reservation",
    "Exit",
    "Help",
]

HELP_TEXT = """Parking Lot Help:
1. Park car in next available spot: Automatically parks your car in the next available spot.
2. Park car in specific spot: Allows you to choose a specific spot to park your car.
3. Remove car from spot: Removes the car from the specified spot.
4. List all spots: Displays the status of all parking spots (Occupied, Reserved, or Available).
5. Find nearest available spot: Parks your car in the available spot nearest to your current position.
6. Reserve a spot in advance: Allows you to reserve a parking spot for future use.
7. Cancel a reservation: Cancels an existing reservation for a spot.
8. Exit: Exits the parking lot system.
9. Help: Displays this help information."""

STATUS_LABELS = {
    SpotStatus.FREE: "Available",
    SpotStatus.OCCUPIED: "Occupied",
    SpotStatus.RESERVED: "Reserved",
}

EXIT_CHOICE = 8


def parse_non_negative_int(text: str) -> Optional[int]:
    """Parse a line as a non-negative integer, or None if it isn't one."""
    text = text.strip()
    if not text.isascii() or not text.isdigit():
        return None
    return int(text)


class MenuSession:
    """
    Line-oriented menu loop over a SpotRegistry.

    Usage:
        session = MenuSession(SpotRegistry(10))
        session.run()
    """

    def __init__(
        self,
        registry: SpotRegistry,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        """
        Initialize the session.

        Args:
            registry: Registry the menu actions operate on
            stdin: Input stream (defaults to sys.stdin)
            stdout: Output stream (defaults to sys.stdout)
        """
        self.registry = registry
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

        self._actions = {
            1: self._park_next,
            2: self._park_specific,
            3: self._remove_car,
            4: self._list_spots,
            5: self._park_nearest,
            6: self._reserve,
            7: self._cancel_reservation,
            9: self._show_help,
        }

    def run(self) -> int:
        """
        Run the menu until Exit is chosen or input ends.

        Returns:
            Process exit code (always 0)
        """
        while True:
            self._print_menu()
            line = self._prompt("Choose an option: ")
            if line is None:
                self._print("\nExiting...")
                break

            choice = parse_non_negative_int(line)
            if choice == EXIT_CHOICE:
                self._print("Exiting...")
                break

            action = self._actions.get(choice) if choice is not None else None
            if action is None:
                self._print("Invalid choice. Please choose a valid option.")
                continue

            try:
                action()
            except RegistryError as e:
                self._print(f"Error: {e}")
            except EOFError:
                self._print("\nExiting...")
                break

        return 0

    # Actions

    def _park_next(self) -> None:
        spot_id = self.registry.allocate_first_free()
        self._print(f"Car parked in spot {spot_id}")

    def _park_specific(self) -> None:
        spot_id = self._read_number(
            "Enter the spot number where you want to park the car: ", "spot number"
        )
        if spot_id is None:
            return
        self.registry.allocate_specific(spot_id)
        self._print(f"Car parked in spot {spot_id}")

    def _remove_car(self) -> None:
        spot_id = self._read_number(
            "Enter the spot number to remove the car from: ", "spot number"
        )
        if spot_id is None:
            return
        self.registry.release(spot_id)
        self._print(f"Car removed from spot {spot_id}")

    def _list_spots(self) -> None:
        self._print("Parking lot status:")
        for spot_id, status in self.registry.snapshot():
            self._print(f"Spot {spot_id}: {STATUS_LABELS[status]}")

    def _park_nearest(self) -> None:
        position = self._read_number("Enter your current position: ", "position")
        if position is None:
            return
        spot_id = self.registry.allocate_nearest(position)
        self._print(f"Car parked in nearest available spot {spot_id}")

    def _reserve(self) -> None:
        spot_id = self._read_number("Enter the spot number to reserve: ", "spot number")
        if spot_id is None:
            return
        details = self._prompt("Enter reservation details: ")
        if details is None:
            raise EOFError
        self.registry.reserve(spot_id, details.strip())
        self._print(f"Spot {spot_id} reserved")

    def _cancel_reservation(self) -> None:
        spot_id = self._read_number(
            "Enter the spot number to cancel the reservation: ", "spot number"
        )
        if spot_id is None:
            return
        self.registry.cancel_reservation(spot_id)
        self._print(f"Reservation for spot {spot_id} canceled")

    def _show_help(self) -> None:
        self._print(HELP_TEXT)

    # I/O helpers

    def _print_menu(self) -> None:
        self._print("\nParking Lot Menu:")
        for number, label in enumerate(MENU_OPTIONS, start=1):
            self._print(f"{number}. {label}")

    def _print(self, text: str) -> None:
        print(text, file=self.stdout)

    def _prompt(self, text: str) -> Optional[str]:
        """Write a prompt and read one line; None at end of input."""
        print(text, end="", file=self.stdout)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line

    def _read_number(self, prompt: str, what: str) -> Optional[int]:
        line = self._prompt(prompt)
        if line is None:
            raise EOFError
        value = parse_non_negative_int(line)
        if value is None:
            logger.debug(f"Rejected {what} input: {line.strip()!r}")
            self._print(f"Invalid input. Please enter a valid {what}.")
        return value

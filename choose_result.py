# choose_result.py - pick one article title when a search returns several
from typing import Callable, List, Optional

from fetch_wikipedia import NoResultsError

QUIT = "q"


def choose_result(candidates: List[str], max_results: int = 5,
                  read_line: Optional[Callable[[str], str]] = None) -> str:
    """
    Returns the chosen title.
    - No candidates: NoResultsError.
    - One candidate: returned without asking.
    - Otherwise the first `max_results` are listed and the user picks by number.
      Only the listed entries are selectable. 'q' (or end of input) exits with code 0.
    """
    read_line = read_line or input
    if not candidates:
        raise NoResultsError("no results found")
    if len(candidates) == 1:
        return candidates[0]

    shown = candidates[:max(1, max_results)]
    print("\nMultiple results found. Please choose one:")
    for i, title in enumerate(shown, start=1):
        print(f"{i}. {title}")
    print(f"{QUIT}. Quit")

    while True:
        try:
            answer = read_line(f"\nEnter the number of the desired result (or '{QUIT}' to quit): ")
        except EOFError:
            answer = QUIT
        answer = answer.strip()

        if answer == QUIT:
            print("\nProgram was exited.")
            raise SystemExit(0)

        try:
            index = int(answer)
        except ValueError:
            index = 0
        if 1 <= index <= len(shown):
            return shown[index - 1]
        print("\nInvalid input. Please try again.")

"""
Terminal Wordle

A single-player game in the terminal. The engine does not count guesses,
so this loop owns the attempts counter and decides when the game ends.
"""

import argparse
import random
from typing import List, Optional, TextIO

from rich.console import Console
from rich.text import Text

from .config.game_settings import MAX_ATTEMPTS
from .models.errors import GuessError
from .models.letters import Position, Word
from .services.game_engine import Game, Keyboard, is_win

KEYBOARD_ROWS = ("QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM")

STYLES = {
    None: "bold white",
    Position.NOT_IN_WORD: "white on #666666",
    Position.WRONG_POSITION: "bold white on yellow",
    Position.CORRECT: "bold white on green",
}


def render_letter(character: str, position: Optional[Position]) -> Text:
    return Text(f" {character} ", style=STYLES[position])


def render_guess(word: Word) -> Text:
    text = Text()
    for letter in word:
        text.append_text(render_letter(letter.character, letter.classification))
    return text


def render_keyboard(keyboard: Keyboard) -> Text:
    """The QWERTY keyboard, each key coloured by the best position seen for it."""
    text = Text()
    for indent, row in enumerate(KEYBOARD_ROWS):
        text.append("  " * indent)
        for character in row:
            text.append_text(render_letter(character, keyboard[character]))
        if indent < len(KEYBOARD_ROWS) - 1:
            text.append("\n")
    return text


def show_board(console: Console, past_guesses: List[Word], keyboard: Keyboard) -> None:
    for word in past_guesses:
        console.print(render_guess(word), justify="center")
    console.print()
    console.print(render_keyboard(keyboard), justify="center")


def _read_line(console: Console, prompt: str, stream: Optional[TextIO]) -> str:
    if stream is None:
        return console.input(prompt)
    line = console.input(prompt, stream=stream)
    if line == "":
        raise EOFError
    return line.rstrip("\n")


def play(game: Game, console: Optional[Console] = None, stream: Optional[TextIO] = None) -> bool:
    """
    Run one game to the end and return True if the player won.

    Invalid guesses are reported and re-prompted without using an attempt.
    Ctrl-C or end of input abandons the game.
    """
    console = console or Console()
    past_guesses: List[Word] = []
    game.remaining_attempts = MAX_ATTEMPTS

    console.print("[bold]Welcome to Wordle![/]\n")

    while game.remaining_attempts > 0:
        guess_number = MAX_ATTEMPTS - game.remaining_attempts + 1
        prompt = f"[bright_green]({guess_number}/{MAX_ATTEMPTS}) >[/] "

        try:
            raw_guess = _read_line(console, prompt, stream).strip()
        except (KeyboardInterrupt, EOFError):
            console.print(f"\nThanks for playing Wordle! The word was [bold]{game.secret_word}[/]!")
            return False

        try:
            word = game.make_guess(raw_guess)
        except GuessError as e:
            console.print(f"[red]{e}[/]")
            continue

        past_guesses.append(word)
        console.clear()
        show_board(console, past_guesses, game.keyboard)
        game.remaining_attempts -= 1

        if is_win(word):
            console.print(f"\n[bold white on green]Congratulations! The word was {game.secret_word}![/]")
            return True

    console.print("\nOut of guesses!")
    console.print(f"[bold white on red]Thanks for playing Wordle! The word was {game.secret_word}![/]")
    return False


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Play Wordle in the terminal.")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for choosing the secret word, for a repeatable game")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed) if args.seed is not None else None
    play(Game.new(rng))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

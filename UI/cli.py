import sys
from typing import List, Optional

from nontransitive_dice.core.config import GameConfig
from nontransitive_dice.core.dice import Die, parse_dice, USAGE_EXAMPLE
from nontransitive_dice.core.engine import GameEngine
from nontransitive_dice.core.errors import (
    IllegalMoveError,
    InputError,
    InternalRandomnessFailure,
    VerificationFailure,
)
from nontransitive_dice.agents import create_agent


def print_dice(dice: List[Die]):
    for die in dice:
        print(f"Die {die.id}: [{die}]")


def read_int(prompt: str) -> Optional[int]:
    """
    Prompt for an integer.
    Returns:
        int or None: The parsed integer, or None if the input is not an integer.
    """
    raw = input(prompt).strip()
    try:
        return int(raw)
    except ValueError:
        return None


def user_throw(engine: GameEngine):
    """
    Let the user pick a die and throw it against the computer's die.
    """
    print("\nChoose a die for your throw:")
    print_dice(engine.dice)
    die_id = read_int("Enter the number of the die: ")
    if die_id is None:
        print("Invalid die selection. Please try again.")
        return
    try:
        ev = engine.user_throw(die_id)
    except InputError as e:
        print(e)
        return
    print(f"You rolled a {ev['user_roll']}!")
    print(f"Computer chose Die {ev['computer_die']} and rolled a {ev['computer_roll']}.")
    if ev["winner"] == "user":
        print("You win!")
    elif ev["winner"] == "computer":
        print("Computer wins!")
    else:
        print("It's a tie!")


def fair_random_generation(engine: GameEngine, range_: Optional[int] = None):
    """
    Run one commit/reveal round: show the HMAC, ask for the user's number, then reveal and verify.
    """
    try:
        digest = engine.begin_fair_round(range_)
    except IllegalMoveError as e:
        print(f"Illegal move: {e}")
        return
    n = range_ or len(engine.dice)
    print(f"Computer has generated its number in range 0..{n - 1}.")
    print(f"HMAC for verification: {digest}")
    while True:
        chosen = read_int(f"Choose a number between 0 and {n - 1}: ")
        if chosen is None:
            print("Invalid number. Please try again.")
            continue
        try:
            reveal = engine.finish_fair_round(chosen)
        except InputError as e:
            print(f"Invalid number: {e}")
            continue
        except VerificationFailure as e:
            print(f"VERIFICATION FAILED: {e}")
            return
        break
    print(f"Computer number: {reveal.committed_value}")
    print(f"Secret key: {reveal.key_hex}")
    print(f"Final result ({reveal.committed_value} + {reveal.chosen_value}) mod {reveal.range} = {reveal.result}")


def show_help(engine: GameEngine):
    print("\nEstimating probabilities, please wait...")
    print(engine.probability_table())


def play(engine: GameEngine):
    """
    Interactive menu loop.
    """
    print("\nWelcome to the Non-Transitive Dice Game!")
    print("Here are the dice configurations:")
    print_dice(engine.dice)
    while True:
        print("\nSelect an option:")
        print("  1) Choose a die for the user throw")
        print("  2) Perform fair random generation")
        print("  3) Help (probability table)")
        print("  4) Exit")
        sel = input("Enter your choice: ").strip()
        if sel == "1":
            user_throw(engine)
        elif sel == "2":
            fair_random_generation(engine)
        elif sel == "3":
            show_help(engine)
        elif sel == "4":
            print("Exiting the game. Goodbye!")
            break
        else:
            print("Invalid choice. Please select a valid option.")


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    agent_name = "random"
    if args and args[0].startswith("--agent="):
        agent_name = args[0].split("=", 1)[1]
        args = args[1:]
    config = GameConfig()
    try:
        dice = parse_dice(args, min_dice=config.min_dice)
        engine = GameEngine(dice, config=config, agent=create_agent(agent_name))
    except ValueError as e:
        print(f"Error: {e}")
        print(f"Usage example: python UI/cli.py [--agent=random|counter] {USAGE_EXAMPLE}")
        return 1
    try:
        play(engine)
    except KeyboardInterrupt:
        print("\nExiting play loop.")
    except InternalRandomnessFailure as e:
        print(f"Fatal: {e}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())

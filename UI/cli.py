from typing import List, Optional

from bowling.core.config import GameConfig
from bowling.core.engine import GameEngine
from bowling.core.player import Player
from bowling.core.rules import rack_state
from bowling.core.state import AWAIT_BONUS_ROLL, AWAIT_FIRST_ROLL
from bowling.persistence import score_log
from UI.console import Console, StdConsole
from UI.prompts import confirm, get_roll, get_valid_int, get_valid_string

ROLL_PROMPTS = {
    AWAIT_FIRST_ROLL: "Enter pins knocked down for first roll:",
    AWAIT_BONUS_ROLL: "Enter pins knocked down for bonus roll:",
}
SECOND_ROLL_PROMPT = "Enter pins knocked down for second roll:"


def create_players(console: Console, config: GameConfig) -> List[Player]:
    """
    Prompt for the number of players and each player's profile.
    Args:
        console (Console): Console to prompt on.
        config (GameConfig): Player count and age bounds.
    Returns:
        list[Player]: The players, in turn order.
    """
    count = get_valid_int(
        console,
        f"Enter number of players ({config.min_players}-{config.max_players}):",
        config.min_players,
        config.max_players,
    )
    players = []
    for i in range(count):
        console.write_line(f"Player {i + 1}:")
        name = get_valid_string(console, "Enter name:")
        nickname = get_valid_string(console, "Enter nickname:")
        age = get_valid_int(console, f"Enter age ({config.min_age}-{config.max_age}):", config.min_age, config.max_age)
        players.append(Player(name, nickname, age, config=config))
    return players


def roll_marks(frame_rolls: List[int]) -> str:
    """
    Scoresheet marks for one frame: X strike, / spare, - miss, otherwise the pin count.
    """
    marks = []
    for i, pins in enumerate(frame_rolls):
        standing, fresh = rack_state(frame_rolls[:i])
        if pins == standing and pins > 0:
            marks.append("X" if fresh else "/")
        elif pins == 0:
            marks.append("-")
        else:
            marks.append(str(pins))
    return " ".join(marks)


def format_frames(player: Player, num_frames: int) -> str:
    return " | ".join(roll_marks(frame) for frame in player.rolls.frames(num_frames))


def play_game(engine: GameEngine, console: Console) -> None:
    """
    Play one full game on the console: every frame for every player, until the engine reports the game ended.
    """
    engine.start_new_game()
    engine.pop_events()
    console.write_line("\nStarting the game!")
    console.write_line(f"Get ready for {engine.config.num_frames} exciting frames!")

    while not engine.is_terminal():
        state = engine.state
        player = engine.current_player
        if state.frame_state == AWAIT_FIRST_ROLL:
            console.write_line(f"\nFrame {state.frame}: {player.name}'s turn ({player.nickname})")
        prompt = ROLL_PROMPTS.get(state.frame_state, SECOND_ROLL_PROMPT)
        pins = get_roll(console, prompt, engine.max_pins())
        engine.apply_roll(pins)
        for event in engine.pop_events():
            t = event["type"]
            if t == "Strike":
                console.write_line("STRIKE!")
            elif t == "Spare":
                console.write_line("SPARE!")
            elif t == "FrameCompleted" and len(event["rolls"]) > 1:
                # strike frames print no score line
                bowler = engine.players[event["player"]]
                console.write_line(f"{bowler.name}'s current score: {event['score']}")
                console.write_line(format_frames(bowler, engine.config.num_frames))


def show_final_scores(engine: GameEngine, console: Console) -> None:
    """Print each player's final score, then fold the scores into the high scores."""
    console.write_line("\nGame Over! Final Scores:")
    for p, final in zip(engine.players, engine.final_scores()):
        console.write_line(f"{p.name} ({p.nickname}) - Age {p.age}: {final}")
    engine.record_high_scores()


def display_saved_scores(console: Console, path: str) -> None:
    console.write_line("\n--- Saved Scores ---")
    for line in score_log.read_records(path):
        console.write_line(line)


def play_session(console: Console, config: Optional[GameConfig] = None) -> List[Player]:
    """
    Run a whole session: create players, then play games until the user stops.
    Every finished game is appended to the score log.
    Args:
        console (Console): Console to interact on.
        config (GameConfig, optional): Session configuration. Defaults to GameConfig().
    Returns:
        list[Player]: The players, with their session high scores.
    """
    if config is None:
        config = GameConfig()
    console.write_line("Welcome to the Ultimate Bowling Game!")
    console.write_line("Create your player profiles (name, nickname, age):")
    players = create_players(console, config)
    engine = GameEngine(players, config)

    while True:
        play_game(engine, console)
        show_final_scores(engine, console)

        score_log.append_game_record(players, config.scores_path)
        if confirm(console, f"\nSaved scores to '{config.scores_path}'. Would you like to view the saved scores? (y/n)"):
            display_saved_scores(console, config.scores_path)

        if not confirm(console, "\nPlay another game? (y/n)"):
            break

    console.write_line("\nHigh Scores:")
    for p in players:
        console.write_line(f"{p.name} ({p.nickname}): {p.high_score}")
    return players


def main():
    try:
        play_session(StdConsole())
    except (KeyboardInterrupt, EOFError):
        print("\nExiting bowling.")


if __name__ == "__main__":
    main()

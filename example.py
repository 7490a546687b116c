#!/usr/bin/env python3
"""
Example usage of the lifegame package.
"""

from lifegame import Randomize, Session, SessionConfig, StepOnce, ToggleRunning


def main():
    """Drive a session the way a host frame loop would."""
    session = Session(SessionConfig(width=20, height=10, seed=1))
    frame_time = 1 / 60

    # Two seconds of frames; the board steps every 0.25s
    for _ in range(120):
        session.update(frame_time)
        snapshot = session.draw_due(frame_time)
        if snapshot is not None:
            print(f"Generation {snapshot.generation} (population {snapshot.population}):")
            print(snapshot)
            print()

    # Pause, step by hand, then reseed
    session.command(ToggleRunning())
    session.command(StepOnce())
    print(f"Stepped by hand to generation {session.board.generation}")
    session.command(Randomize(0.5))

    print("Final statistics:")
    for key, value in session.statistics().items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()

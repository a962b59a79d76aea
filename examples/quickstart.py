"""Minimal quickstart script for Scrollwise.

Replays the bundled sample history through the attention guardrail and the
feed engine, then prints the same session summary the CLI ``report`` command
shows.
"""

from scrollwise import AttentionGuardrail, FeedEngine, build_report
from scrollwise.data import load_sample_history
from scrollwise.logging import configure_logging


def main() -> None:
    configure_logging()
    guardrail = AttentionGuardrail(hour=21)
    engine = FeedEngine()
    for event in load_sample_history():
        guardrail.record(event)
        engine.add_watch(event)
    print(build_report(guardrail, engine, word_count=8).render_text())


if __name__ == "__main__":
    main()

"""Interactive terminal pack opener."""

from __future__ import annotations

from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.table import Table

from .app import SimulatorApp
from .domain.cards import Pack, PackCard, rarity_slug
from .domain.reveal import RevealPhase
from .domain.session import PackSession

RARITY_STYLES = {
    "common": "white",
    "uncommon": "green",
    "rare": "cyan",
    "rare-holo": "bright_cyan",
    "rare-ultra": "magenta",
    "secret-rare": "bold yellow",
}

SETS_SHOWN = 15


class TerminalOpener:
    def __init__(self, app: SimulatorApp, console: Console, *, chat_id: int = 0) -> None:
        self.app = app
        self.console = console
        self.session: PackSession = app.session(chat_id)

    async def run(self) -> None:
        self.console.print("[bold]Pokémon Pack Simulator[/bold]")
        await self.session.load_sets()
        if not self.session.state.sets:
            if not self.show_error():
                self.console.print("No sets available.", style="yellow")
            return

        while True:
            self.choose_set()
            with self.console.status("Opening pack..."):
                opened = await self.session.open_pack()
            if not opened:
                self.show_error()
                if not Confirm.ask("Try again?", default=True):
                    return
                continue

            self.reveal()
            self.show_summary(self.session.state.reveal.pack)
            self.session.reset()
            if not Confirm.ask("Open another pack?", default=True):
                return

    def choose_set(self) -> None:
        state = self.session.state
        table = Table(show_header=True, header_style="bold")
        table.add_column("ID")
        table.add_column("Name")
        table.add_column("Series")
        table.add_column("Released")
        for card_set in state.sets[:SETS_SHOWN]:
            table.add_row(
                card_set.set_id, card_set.name, card_set.series, card_set.release_date.isoformat()
            )
        self.console.print(table)

        default = state.selected_set.set_id if state.selected_set else state.sets[0].set_id
        while True:
            set_id = Prompt.ask("Set ID", default=default).strip()
            try:
                card_set = self.session.select_set(set_id)
            except KeyError:
                self.console.print("Unknown set.", style="red")
                continue
            self.console.print(f"📦 [bold]{card_set.name}[/bold] ({card_set.series})")
            return

    def reveal(self) -> None:
        while self.session.phase is RevealPhase.REVEALING:
            reveal = self.session.state.reveal
            self.console.print(format_card_line(reveal.current, reveal.index, reveal.total))
            Prompt.ask("Press Enter to reveal the next card", default="", show_default=False)
            self.session.next_card()

    def show_summary(self, pack: Pack | None) -> None:
        if pack is None:
            return
        table = Table(title="Your Complete Pack", show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Name")
        table.add_column("Rarity")
        table.add_column("ID")
        for position, pack_card in enumerate(pack, start=1):
            card = pack_card.card
            table.add_row(str(position), card.name, styled_rarity(card.rarity), card.card_id)
        self.console.print(table)
        for slot in pack.slots:
            if slot.is_short:
                self.console.print(
                    f"{slot.rarity}: only {len(slot.cards)} of {slot.requested} cards available.",
                    style="yellow",
                )

    def show_error(self) -> bool:
        error = self.session.state.error
        if error:
            self.console.print(f"Error: {error}", style="red")
        return bool(error)


def styled_rarity(rarity: str) -> str:
    style = RARITY_STYLES.get(rarity_slug(rarity), "white")
    return f"[{style}]{rarity or 'Unknown'}[/{style}]"


def format_card_line(pack_card: PackCard | None, index: int, total: int) -> str:
    if pack_card is None:
        return ""
    card = pack_card.card
    return f"Card {index + 1} of {total}: [bold]{card.name}[/bold] {styled_rarity(card.rarity)}"


async def run_terminal(app: SimulatorApp, console: Console | None = None) -> None:
    await TerminalOpener(app, console or Console()).run()


__all__ = ["TerminalOpener", "run_terminal", "format_card_line", "styled_rarity"]

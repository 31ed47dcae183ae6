"""Factories for tests and prototyping."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from faker import Faker

from ..domain.cards import Card, CardSet


@dataclass(slots=True)
class SetFactory:
    faker: Faker = field(default_factory=Faker)

    def build(self, set_id: str | None = None, *, release_date: date | None = None) -> CardSet:
        set_id = set_id or self.faker.unique.lexify(text="sv??").lower()
        return CardSet(
            set_id=set_id,
            name=self.faker.word().title(),
            series=self.faker.word().title(),
            release_date=release_date or self.faker.date_between(start_date="-20y"),
            logo_url=f"https://images.example.test/{set_id}/logo.png",
            symbol_url=f"https://images.example.test/{set_id}/symbol.png",
        )


@dataclass(slots=True)
class CardFactory:
    faker: Faker = field(default_factory=Faker)

    def build(self, set_id: str, rarity: str) -> Card:
        number = self.faker.unique.random_int(min=1, max=99999)
        card_id = f"{set_id}-{number}"
        return Card(
            card_id=card_id,
            name=self.faker.word().title(),
            rarity=rarity,
            small_image=f"https://images.example.test/{set_id}/{number}.png",
            large_image=f"https://images.example.test/{set_id}/{number}_hires.png",
            set_id=set_id,
        )

    def batch(self, count: int, set_id: str, rarity: str) -> Iterable[Card]:
        for _ in range(count):
            yield self.build(set_id, rarity)

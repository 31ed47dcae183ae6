from collections import Counter
from random import Random

import pytest

from boosterforge.domain.cards import Card
from boosterforge.domain.exceptions import CatalogUnavailable, PackGenerationFailed
from boosterforge.domain.generator import PackGenerator, draw_without_replacement
from boosterforge.domain.layout import DEFAULT_LAYOUT, PackLayout, PackSlot, RareSlot, RarityBand
from boosterforge.testing import ScriptedRandom, stocked_catalog


@pytest.fixture()
def card_set(catalog):
    return catalog.sets[0]


@pytest.mark.asyncio()
async def test_default_layout_opens_ten_cards(catalog, card_set):
    generator = PackGenerator(catalog, DEFAULT_LAYOUT, rng=Random(3))
    pack = await generator.generate(card_set)

    assert len(pack) == 10
    assert [slot.rarity for slot in pack.slots[:2]] == ["Common", "Uncommon"]
    assert pack.slots[2].rarity in {"Rare", "Rare Ultra", "Secret Rare"}
    counts = Counter(pack_card.card.rarity for pack_card in pack)
    assert counts["Common"] == 6
    assert counts["Uncommon"] == 3
    for slot in pack.slots:
        ids = [card.card_id for card in slot.cards]
        assert len(ids) == len(set(ids))
    assert not pack.is_short


@pytest.mark.asyncio()
async def test_pack_cards_follow_slot_order(catalog, card_set):
    generator = PackGenerator(catalog, DEFAULT_LAYOUT, rng=Random(11))
    pack = await generator.generate(card_set)

    flattened = [card for slot in pack.slots for card in slot.cards]
    assert [pack_card.card for pack_card in pack] == flattened


@pytest.mark.asyncio()
async def test_slots_are_queried_in_declaration_order(catalog, card_set):
    rng = ScriptedRandom([0.0] * 9 + [0.019])
    generator = PackGenerator(catalog, DEFAULT_LAYOUT, rng=rng)
    pack = await generator.generate(card_set)

    assert [rarity for _, rarity, _ in catalog.queries] == ["Common", "Uncommon", "Secret Rare"]
    assert all(page_size == 100 for _, _, page_size in catalog.queries)
    assert pack.slots[-1].rarity == "Secret Rare"
    assert pack[-1].card.rarity == "Secret Rare"


@pytest.mark.asyncio()
@pytest.mark.parametrize(
    ("roll", "expected"),
    [(0.15, "Rare"), (0.149, "Rare Ultra"), (0.02, "Rare Ultra"), (0.0, "Secret Rare")],
)
async def test_rare_slot_roll_picks_band(catalog, card_set, roll, expected):
    rng = ScriptedRandom([0.0] * 9 + [roll])
    pack = await PackGenerator(catalog, rng=rng).generate(card_set)
    assert pack.slots[-1].rarity == expected


@pytest.mark.parametrize(
    ("roll", "expected"),
    [
        (0.019, "Secret Rare"),
        (0.02, "Rare Ultra"),
        (0.149, "Rare Ultra"),
        (0.15, "Rare"),
        (0.999, "Rare"),
    ],
)
def test_rare_band_edges(roll, expected):
    slot = DEFAULT_LAYOUT.rare_slots()[0]
    assert slot.pick(roll) == expected


def test_rare_slot_falls_back_to_last_band():
    slot = RareSlot((RarityBand("Holo", 0.5), RarityBand("Rare", 0.9)))
    assert slot.pick(0.95) == "Rare"


@pytest.mark.asyncio()
async def test_small_pool_underfills_slot_silently():
    catalog = stocked_catalog(rarities={"Common": 2, "Uncommon": 3, "Rare": 5})
    card_set = catalog.sets[0]
    layout = PackLayout.of([PackSlot("Common", 6), PackSlot("Uncommon", 3), PackSlot("Rare", 1)])

    pack = await PackGenerator(catalog, layout, rng=Random(5)).generate(card_set)

    assert len(pack) == 6
    assert pack.slots[0].requested == 6
    assert len(pack.slots[0].cards) == 2
    assert pack.is_short
    assert pack.requested == 10


@pytest.mark.asyncio()
async def test_empty_rarity_pool_shortens_pack():
    catalog = stocked_catalog(rarities={"Common": 20, "Rare": 5})
    card_set = catalog.sets[0]
    layout = PackLayout.of([PackSlot("Common", 6), PackSlot("Uncommon", 3), PackSlot("Rare", 1)])

    pack = await PackGenerator(catalog, layout, rng=Random(5)).generate(card_set)

    assert len(pack) == 7
    assert pack.slots[1].cards == ()


@pytest.mark.asyncio()
async def test_catalog_failure_aborts_generation(catalog, card_set):
    catalog.fail_on("Uncommon", "Service temporarily down")
    generator = PackGenerator(catalog, rng=Random(1))

    with pytest.raises(PackGenerationFailed) as excinfo:
        await generator.generate(card_set)

    assert str(excinfo.value) == "Service temporarily down"
    assert isinstance(excinfo.value.__cause__, CatalogUnavailable)
    assert excinfo.value.cause.message == "Service temporarily down"


@pytest.mark.asyncio()
async def test_generate_requires_a_set(catalog):
    with pytest.raises(ValueError):
        await PackGenerator(catalog).generate(None)


@pytest.mark.asyncio()
async def test_page_size_is_forwarded(catalog, card_set):
    generator = PackGenerator(catalog, rng=Random(2), page_size=25)
    await generator.generate(card_set)
    assert {page_size for _, _, page_size in catalog.queries} == {25}


@pytest.mark.asyncio()
async def test_pack_keys_are_unique_for_repeated_cards():
    catalog = stocked_catalog(rarities={"Common": 1})
    card_set = catalog.sets[0]
    layout = PackLayout.of([PackSlot("Common", 1), PackSlot("Common", 1)])

    pack = await PackGenerator(catalog, layout, rng=Random(0)).generate(card_set)

    assert pack[0].card.card_id == pack[1].card.card_id
    assert pack[0].key != pack[1].key
    assert pack[0].key.startswith(pack[0].card.card_id)


def _cards(*ids):
    return [Card(card_id=card_id, name=card_id.title()) for card_id in ids]


def test_draw_without_replacement_removes_picked_cards():
    pool = _cards("a", "b", "c")
    drawn = draw_without_replacement(pool, 3, ScriptedRandom([0.99, 0.0, 0.0]))

    assert [card.card_id for card in drawn] == ["c", "a", "b"]
    assert [card.card_id for card in pool] == ["a", "b", "c"]


def test_draw_without_replacement_stops_when_pool_exhausted():
    rng = ScriptedRandom(fallback=0.5)
    drawn = draw_without_replacement(_cards("a", "b"), 5, rng)

    assert len(drawn) == 2
    assert rng.calls == 2


def test_draw_without_replacement_never_repeats():
    pool = _cards(*[f"c{i}" for i in range(30)])
    rng = Random(42)
    for _ in range(50):
        drawn = draw_without_replacement(pool, 10, rng)
        assert len({card.card_id for card in drawn}) == 10

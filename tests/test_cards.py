from __future__ import annotations

import logging

import pytest

from tour_ranker.ranking import SearchRequest, rank_and_group, rank_offers
from tour_ranker.ranking.budget import filter_by_budget
from tour_ranker.ranking.cards import assemble_card, generate_badges, value_score
from tour_ranker.ranking.scoring import price_score
from tour_ranker.hotels.merger import offer_to_option

REQUEST = SearchRequest(budget=400000, budget_type="total", adults=2, children=0, destination="Турция")


def test_duplicate_hotel_from_two_providers_becomes_one_card(make_offer):
    offers = [
        make_offer(provider="leveltravel", hotel="Rixos Premium Belek", price=150000, destination="Турция"),
        make_offer(provider="travelata", hotel="RIXOS PREMIUM BELEK RESORT", price=160000, destination="Турция"),
    ]

    request = SearchRequest(budget=200000, budget_type="total", adults=2, destination="Турция")

    cards = rank_and_group(offers, request, {"price": 5, "starRating": 5})

    assert len(cards) == 1
    card = cards[0]
    assert len(card.options) == 2
    assert card.best_price.price == 150000
    assert (card.price_range.min, card.price_range.max) == (150000, 160000)
    assert card.price_range.currency == "RUB"
    assert [option.provider for option in card.options] == ["leveltravel", "travelata"]


@pytest.mark.parametrize("threshold", ["0.95", "high"])
def test_rank_and_group_ignores_environment_overrides(make_offer, monkeypatch, threshold):
    monkeypatch.setenv("TOURRANK_MATCH_THRESHOLD", threshold)
    offers = [
        make_offer(provider="leveltravel", hotel="Rixos Premium Belek", price=150000),
        make_offer(provider="travelata", hotel="RIXOS PREMIUM BELEK RESORT", price=160000),
    ]

    cards = rank_and_group(offers, SearchRequest(budget=200000), {"price": 1})

    assert len(cards) == 1
    assert len(cards[0].options) == 2


def test_options_are_sorted_by_price_and_best_price_is_cheapest(make_offer):
    offers = [
        make_offer(provider="a", price=210000),
        make_offer(provider="b", price=180000),
        make_offer(provider="c", price=195000),
    ]

    card = assemble_card(offers, match_score=50.0)

    prices = [option.price for option in card.options]
    assert prices == sorted(prices)
    assert card.best_price.price == min(prices)
    assert card.price_range.max == max(prices)


def test_per_person_budget_filter_multiplies_by_adults(make_offer):
    request = SearchRequest(budget=100000, budget_type="perPerson", adults=2)
    offer = make_offer(price=250000)

    assert rank_and_group([offer], request, {"price": 1}) == []


def test_per_person_budget_filter_and_price_score_disagree(make_offer):
    # The filter compares price * adults with the budget while the price score
    # compares the raw price with the budget. Both readings are kept.
    request = SearchRequest(budget=100000, budget_type="perPerson", adults=2)
    kept = make_offer(hotel="Kept", price=45000)
    dropped = make_offer(hotel="Dropped", price=60000)

    survivors = filter_by_budget([kept, dropped], request)

    assert survivors == [kept]
    assert price_score(dropped.price, request.budget, request.budget_type) > 0.9
    assert price_score(kept.price, request.budget, request.budget_type) == pytest.approx(0.5 + 45000 / 70000 * 0.5)


def test_budget_filter_drops_suspiciously_cheap_offers(make_offer):
    request = SearchRequest(budget=200000)
    offers = [make_offer(price=79999), make_offer(price=80001), make_offer(price=200000), make_offer(price=200001)]

    kept = filter_by_budget(offers, request)

    assert [offer.price for offer in kept] == [80001, 200000]


def test_budget_filter_without_budget_keeps_everything(make_offer):
    offers = [make_offer(price=1), make_offer(price=10_000_000)]

    assert filter_by_budget(offers, SearchRequest(budget=None)) == offers


def test_budget_filter_uses_default_adults_when_missing(make_offer):
    request = SearchRequest(budget=100000, budget_type="perPerson", adults=0)

    assert filter_by_budget([make_offer(price=50000), make_offer(price=50001)], request) == [make_offer(price=50000)]


def test_exclusive_badge_requires_instant_confirmation_on_every_option(make_offer):
    confirmed = [make_offer(price=150000, instant_confirm=True), make_offer(price=160000, instant_confirm=True)]
    mixed = [make_offer(price=150000, instant_confirm=True), make_offer(price=160000, instant_confirm=False)]

    assert "exclusive" in assemble_card(confirmed, 0).badge_types
    assert "exclusive" not in assemble_card(mixed, 0).badge_types


def test_discount_badge_uses_largest_discount(make_offer):
    options = [
        offer_to_option(make_offer(price=90000, price_old=100000)),
        offer_to_option(make_offer(price=80000, price_old=100000)),
        offer_to_option(make_offer(price=120000, price_old=100000)),
        offer_to_option(make_offer(price=85000)),
    ]

    badges = {badge.type: badge for badge in generate_badges(options)}

    assert badges["discount"].text == "-20%"
    assert "hot" not in badges


def test_discount_rounds_half_up(make_offer):
    option = offer_to_option(make_offer(price=87500, price_old=100000))

    assert generate_badges([option])[0].text == "-13%"


def test_hot_badge(make_offer):
    badges = generate_badges([offer_to_option(make_offer(is_hot=True)), offer_to_option(make_offer())])

    assert [badge.type for badge in badges] == ["hot"]
    assert badges[0].text == "Горящий тур"


def test_best_value_weighs_included_services(make_offer):
    cheap = make_offer(provider="cheap", price=100000, meal_type="Без питания")
    inclusive = make_offer(provider="inclusive", price=110000, meal_type="Все включено", instant_confirm=True)

    card = assemble_card([cheap, inclusive], match_score=10)

    assert value_score(card.options[0]) == pytest.approx(20.0)
    assert card.best_price.provider == "cheap"
    assert card.best_value.provider == "inclusive"
    assert card.recommended == card.best_value


def test_value_score_handles_non_positive_price(make_offer):
    room_only = make_offer(price=0, meal_type="Без питания", transfer_included=False)
    all_inclusive = make_offer(price=0, transfer_included=False)

    assert value_score(offer_to_option(room_only)) == 0.0
    assert value_score(offer_to_option(all_inclusive)) == 20.0


def test_cards_sorted_by_match_score(make_offer):
    offers = [
        make_offer(hotel="Budget Inn", stars=3, price=200000, rating=3.0),
        make_offer(hotel="Maxx Royal Kemer", stars=5, price=300000, rating=4.9),
    ]

    cards = rank_and_group(offers, REQUEST, {"stars": 1, "reviews": 1})

    assert [card.hotel.name for card in cards] == ["Maxx Royal Kemer", "Budget Inn"]
    assert cards[0].match_score > cards[1].match_score


def test_card_match_score_comes_from_seed_offer(make_offer):
    seed = make_offer(hotel="Rixos Premium Belek", rating=4.0, price=200000)
    better = make_offer(hotel="Rixos Premium Belek Resort", rating=5.0, price=210000)

    cards = rank_and_group([seed, better], REQUEST, {"reviews": 1})

    assert len(cards) == 1
    assert cards[0].match_score == pytest.approx(80.0)


def test_rank_and_group_empty_input():
    assert rank_and_group([], REQUEST, {"price": 1}) == []


def test_rank_and_group_logs_summary(make_offer, caplog):
    caplog.set_level(logging.INFO, logger="tour_ranker.ranking.engine")

    rank_and_group([make_offer(price=200000)], REQUEST, {"price": 1})

    assert "into 1 hotel cards" in caplog.text


def test_rank_offers_returns_flat_ranking(make_offer):
    offers = [
        make_offer(hotel="Low", rating=3.0, price=200000),
        make_offer(hotel="High", rating=5.0, price=200000),
        make_offer(hotel="Too expensive", rating=5.0, price=500000),
    ]

    ranked = rank_offers(offers, REQUEST, {"reviews": 1})

    assert [offer.hotel for offer, _ in ranked] == ["High", "Low"]
    assert ranked[0][1].total == pytest.approx(100.0)


def test_card_to_dict_is_json_ready(make_offer):
    card = assemble_card([make_offer(price=150000, image="https://img.example.com/a.jpg")], match_score=42.0)

    payload = card.to_dict()

    assert payload["match_score"] == 42.0
    assert payload["best_price"]["price"] == 150000
    assert payload["hotel"]["images"][0]["thumb"] == "https://img.example.com/a_150x150.jpg"
    assert payload["hotel"]["reviews"] == {"count": 0, "score": 0.0}

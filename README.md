# calatorie

A turn-by-turn survival journey played in the terminal. You walk a route of
roads, camps and rivers towards the final town. Every step costs energy,
depending on how much you carry. Along the road you find food and materials;
in camps you rest, craft, sell loot and upgrade your clothing; at each river
you must pay to get across, or the game is lost.

The game speaks Romanian. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For development, with the test dependencies:

```
pip install -e ".[test]"
pytest
```

## Playing

```
calatorie
```

The same entry point is `calatorie.meniu.main`. It takes no options besides
`--help`. If a data file cannot be found it prints the error to standard error
and exits with status 1.

The main menu offers:

1. Start joc nou – start a new journey
2. Iesire – quit

Every choice is typed as a number followed by Enter. The game also ends when a
river cannot be paid for or when standard input runs out.

### The route

The route has 21 road segments, each 2 to 4 steps long (the lengths are drawn
at random and printed when a journey starts), with a camp after each one.
Rivers come after the 6th, 13th and 21st camps, and the town waits at the end;
reaching it returns you to the main menu. Crossing the rivers costs 70, 140
and 230 coins in turn.

Each step along a road costs
`max(1, round(2 × total weight × (1 − reduction / 100)))` energy, where the
total weight is the loot carried, the backpack itself (1.5 kg) and the four
pieces of clothing. Energy does not go below 0.

### On the road

On every road step you find a random unprocessed food or material. Each item
is weighted by `1 / (1 + rarity)`, scaled by your luck. You can take it, leave
it, throw something out of the backpack (capacity 10 kg) to make room, or eat
food that does not fit. With a 10% chance a rabbit appears; hunting it costs 3
energy and succeeds half the time, giving a "carne de iepure".

### In camp

Your energy is restored to 100 plus the shirt's stamina bonus, and you can:

1. Crafting – use a recipe whose ingredients you carry; the product is the food
   of the same name from `mancare.json`
2. Vinde loot – sell an item from the backpack for its price
3. Upgrade – improve a piece of clothing, paying coins and materials
0. Continua calatoria – carry on

Upgrade costs, from level 1 to 2 and from 2 to 3 (level 3 is the maximum):

| Piece     | 1 → 2                | 2 → 3                         |
|-----------|----------------------|-------------------------------|
| Palarie   | 10 coins, 1 piele    | 15 coins, 2 lana              |
| Bluza     | 15 coins, 2 piele    | 20 coins, 2 piele, 2 lana     |
| Pantaloni | 15 coins, 2 piele    | 20 coins, 3 piele, 1 lana     |
| Pantofi   | 10 coins, 1 piele    | 20 coins, 4 piele             |

Every successful upgrade adds 0.125% luck and makes the piece a little heavier.

## Data files

The game reads three JSON files at start-up. The package does not ship them;
you provide them. Each is looked up in the current directory first, then in
`resurse/`, then in `../resurse/`.

`mancare.json` – a list of food items:

```json
[
  {"nume": "mere", "greutate": 0.3, "raritate": 1, "energie": 10, "pret": 3, "procesata": false}
]
```

`materiale.json` – a list of materials:

```json
[
  {"nume": "piele", "greutate": 0.5, "raritate": 2, "pret": 5}
]
```

`retete.json` – a list of recipes:

```json
[
  {
    "rezultat": "tocana",
    "tip": "mancare",
    "ingrediente": [
      {"nume": "mere", "cantitate": 2}
    ]
  }
]
```

Only unprocessed food (`"procesata": false`) and materials appear on the road.

## Using it as a library

- `calatorie.meniu.Meniu(intrare, iesire, rng)` runs the game on any text
  streams and `random.Random`; `ruleaza()` loads the data and serves the menu.
- `calatorie.jucator.Jucator` – energy, money, luck, backpack and clothing.
- `calatorie.rucsac.Rucsac` – the backpack and its loot.
- `calatorie.haine` – `Palarie`, `Bluza`, `Pantaloni`, `Pantofi`; `upgrade()`
  raises `UpgradeError` listing every missing resource.
- `calatorie.traseu.Traseu` and `TipLocatie` – the route and progress on it.
- `calatorie.memorie.MemorieLoot` – the loot catalogue and the random draw.
- `calatorie.reteta.Reteta` and `incarca_retete()` – recipes.
- `calatorie.evenimente` – road, river and camp events; `JocPierdut` marks a
  lost game.
- `calatorie.fisiere` – `deschide_fisier_json()` and `incarca_json()`.

## What it does not do

There is no saving or loading of a journey, and no bundled game data. The
clothing bonuses for energy drain and pocket space are applied only by
`Jucator.update_statusuri()`, which the game loop does not call; running out of
energy does not end a journey.
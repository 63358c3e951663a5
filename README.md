# godsfun

Building blocks for a multi-player take on Conway's Game of Life. Every
player owns a creature kind and seeds living creatures into their own area of
a shared field. The model then computes generation after generation; the game
is decided when only one kind of creature is left alive (it wins) or none is
(a draw).

## Installation

```
pip install .
```

This also installs `pygame`, which `godsfun.user_input` uses to read window
events and `godsfun.view` uses to draw onto surfaces.

## The `godsfun` command

```
godsfun
```

prints `Hello World!` and exits with status 0. It takes no options besides
`--help`.

## What the package does not do

The package does not open a game window and does not assemble a playable
game by itself: the `godsfun` command starts no game. To play, a program has
to create a pygame display, build the field, areas, players, model, view and
`UserInput`, hand them to `GameController` and call its `game()` method.

## The modules

- `godsfun.creature`: `Creature` (an `id`, a `color` and an `is_alive` flag,
  with `kill()` and `revive()`), `Cell`, which holds one creature, and
  `next_creature()`, which returns creatures with increasing ids, counted
  separately in every thread.
- `godsfun.observer`: `GameEvent`, the `Observer` base class and `Subject`,
  which keeps weak references to observers per event and calls their
  `update(subject, event)` from `notify(event)`.
- `godsfun.game_field`: `GameFieldExcludedCells`, a rectangular grid of
  cells in which some positions are forbidden. `get_cell` and `set_cell`
  raise `ValueError` for an excluded cell and `IndexError` outside the
  grid; `set_cell` stores a copy and fires `GAME_FIELD_UPDATE`.
- `godsfun.game_field_area`: `GameFieldExcludedCellsArea`, a lockable
  rectangle of a field between two inclusive corners, and
  `GameFieldExcludedCellsAreaFactory.create_area()`. A cell is available
  when it is inside the rectangle, the area is unlocked and the field does
  not exclude it.
- `godsfun.game_model`: `GameModel.compute()` advances one generation in
  an area. A living creature survives with more than two living neighbours
  and an empty cell comes to life with exactly three (`is_alive_next()`);
  a newborn takes the kind most common among its neighbours, ties going to
  the smallest id. It returns `(True, 0)` while two or more kinds are
  alive, otherwise `(False, id)` for the only kind left, or `(False, -1)`.
- `godsfun.player`: `Player`, which on `USER_ASKED_SET_CREATURE` places its
  creature in the clicked cell of its area, or kills its own living
  creature there and fires `PLAYER_KILL_CREATURE`.
- `godsfun.user_input`: `UserInput` and `CoordInput`. `handle_event()` turns
  a window close into `USER_ASKED_CLOSE`, a right click into
  `USER_ASKED_SET_CREATURE` (recording the clicked cell for
  `last_coord_input()`) and Escape into `USER_ASKED_RESTART`;
  `read_input()` takes one pending event from the pygame queue.
- `godsfun.view`: drawable components for pygame surfaces:
  `DrawableStackLayout`, `DrawableNestedLayout`, `DrawableFrame`,
  `DrawableGridCanvas` and `DrawableText`, with named children looked up
  through `get_component()`.
- `godsfun.game_controller`: `GameController`, which runs rounds: each
  player places `k` creatures, then the model computes up to `t`
  generations, then each player places `n` more, until the game is decided.
  It writes the turn, the remaining count and the result into the view's
  `DrawableText` component named `"text"`. Escape restarts, closing the
  window stops.

## Running the tests

```
pip install .[test]
pytest
```
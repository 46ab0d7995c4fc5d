# estudos

A set of small JSON web services built on Flask and SQLite, a few
concurrency exercises, and the rules of a vertical space shooter.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Services

Each service has a command that starts it with Flask's built-in server.

### Job openings

```
estudos-opportunities [--db PATH] [--host HOST] [--port PORT]
```

Defaults: `--db ./db/main.db`, `--host 0.0.0.0`, `--port 8080`. When the
database file does not exist, its directory and the file are created first
(the directory must not already exist in that case); if that fails the
command logs an error and exits with status 1.

Routes under `/api/v1`:

| Method | Path                   | Purpose                       |
|--------|------------------------|-------------------------------|
| GET    | `/api/v1/opening?id=N` | show one opening              |
| POST   | `/api/v1/opening`      | create an opening             |
| PUT    | `/api/v1/opening?id=N` | update the fields given       |
| DELETE | `/api/v1/opening?id=N` | delete an opening (soft)      |
| GET    | `/api/v1/openings`     | list every opening            |

Request bodies use the keys `role`, `company`, `location`, `link`, `remote`
and `salary`. A new opening needs all of them, with a positive `salary`; an
update needs at least one. Successful replies carry `message` and `data`
(an opening is encoded with the keys `ID`, `CreatedAt`, `UpdatedAt`,
`DeletedAt`, `Role`, `Company`, `Location`, `Remote`, `Link`, `Salary`);
errors carry `message` and `errorCode`.

In code: `estudos.opportunities.app.create_app(store)` builds the Flask
application around an `estudos.opportunities.database.OpeningStore`, which
also accepts `":memory:"`. `estudos.opportunities.requests` holds
`CreateOpeningRequest`, `UpdateOpeningRequest` and `ValidationError`, and
`estudos.opportunities.logger.Logger` writes `DEBUG`/`INFO`/`WARNING`/`ERROR`
lines with date and time.

### Polls

```
estudos-polls [--db PATH] [--host HOST] [--port PORT]
```

Defaults: `--db polls.db`, `--host 0.0.0.0`, `--port 8080`.

| Method | Path                                               |
|--------|----------------------------------------------------|
| POST   | `/api/v1/polls`                                    |
| GET    | `/api/v1/polls`                                    |
| GET    | `/api/v1/polls/<id>`                               |
| PUT    | `/api/v1/polls/<id>`                               |
| DELETE | `/api/v1/polls/<id>`                               |
| POST   | `/api/v1/polls/<poll_id>/options/<option_id>/vote` |

A new poll must have between three and five `options`; dates are RFC 3339
strings in `start_date` and `end_date`. When polls are listed, each gets a
`status` of `active`, `not_started` or `ended` (see
`estudos.polls.models.poll_status`). Errors are returned as `{"error": ...}`.
Deleting answers `Poll deleted` whenever the id is a number, whether or not a
poll with that id existed.

### Todos

```
estudos-todos [--host HOST] [--port PORT]
```

Defaults: `--host localhost`, `--port 9090`. An in-memory list starting with
three items: `GET /todos`, `GET /todos/<id>`, `PATCH /todos/<id>` (toggles
`completed`) and `POST /todos`. Replies are indented JSON. Items are lost
when the server stops.

### Products

```
estudos-products [--db PATH] [--host HOST] [--port PORT]
```

Defaults: `--db products.db`, `--host 0.0.0.0`, `--port 8000`. The
`products` table is created if missing. `POST /products` creates a product
with a generated UUID from a JSON body holding `Name` and `Price` (keys
matched case-insensitively) and answers 201; `GET /products` lists them, or
returns `null` when there are none. The use cases in
`estudos.products.usecase` work against any
`estudos.products.entity.ProductRepository`, such as
`estudos.products.repository.SqlProductRepository`.

## Exercises

`estudos.exercises` holds small functions: `soma`, `soma_limitada` (raises
`TotalTooLarge` when the total is over 10), `contador` (numbered lines with a
pause between them), `distribute_work` (values handed one at a time to
worker threads; returns what each worker received) and `book_hotel`
(returns `"Hotel is full"` when the booking would take at least as long as
the timeout, otherwise `"Room reserved with sucess"`).

## Game rules

`estudos.game` holds the space shooter without any drawing:
`geometry.Rect` and `geometry.Vector`, the tick-based `timer.Timer`, the
`Laser`, `Meteor`, `Planet`, `Star` and `Player` entities in
`entities`, and `world.Game` with its `world.Menu`. `Game(sprites, rng, tps)`
takes a `SpriteSet` of `Sprite` sizes; each `update(keys)` takes a `Keys`
value, spawns and moves entities, removes meteors hit by lasers, resets the
round when a meteor touches the player, and keeps `score` and `best_score`.

## What this package does not do

- The game has no window, rendering, images, fonts or keyboard reading;
  a front end must supply `Keys` each tick and draw the entities itself.
- The products service only takes products over HTTP; it does not read
  them from a message queue.
- All storage is SQLite; no database server is used.
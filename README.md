# adplatform

Building blocks for an advertising platform:

- **Profanity moderation** for Cyrillic and Latin text. It expands digit and
  symbol substitutions, such as `0` for `о` or `@` for `а`, and transliterates
  Latin letters. It can also match words within a small edit distance of a
  dictionary entry, and it can score a text's context.
- **API building blocks**:
  - typed API errors that carry their HTTP status and JSON body;
  - validation helpers and validation error formatting;
  - image upload checks and an in-memory image store;
  - access-log line formatting;
  - a catalogue of the platform's HTTP endpoints, with a router and an
    OpenAPI document built from it.
- **A Telegram bot** that lets advertisers register or log in and then shows
  them a panel menu. It talks to the platform backend over HTTP.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Profanity checking

A dictionary is a directory tree of word lists. `load_dictionary` reads every
file ending in `.txt` and every gzip-compressed file ending in `.gz`, walking
sub-directories too. Each file holds one word per line. Lines are trimmed and
lower-cased. Blank lines and lines starting with `#` are skipped.

```python
from adplatform.dictionary import load_dictionary
from adplatform.checker import ProfanityChecker

bad_words = load_dictionary("dictionaries")

basic = ProfanityChecker(bad_words)
advanced = ProfanityChecker(bad_words).with_typo_check(1, 4)
contextual = ProfanityChecker(bad_words).with_context_analysis(True)

basic.check("цветок")
flagged, matches, context_score = contextual.check_with_details("очень очень плохо")
```

The `with_*` methods return a configured copy and leave the original checker
unchanged.

`check_with_details` returns a `CheckResult` named tuple with three fields:

- `flagged`: the verdict;
- `matches`: the normalised word variants that were found;
- `context_score`: the context score.

`with_typo_check(max_distance, min_length)` also matches close misspellings. A
word matches when it is within `max_distance` edits of a dictionary word. Both
the word and the dictionary word must be at least `min_length` long, measured
in UTF-8 bytes. The edit distance itself is counted in characters; see
`adplatform.dictionary.levenshtein`.

With context analysis on, `adplatform.context.analyze_context` scores the text
from 0 to 1. Each intensifier, such as «очень» or «полный», adds 0.3. Repeated
words add up to 0.5. A text is flagged when its score reaches 0.7.

The lower-level pieces can also be used on their own:

- `adplatform.normalization`: `extract_words`, `normalize_word`,
  `transliterate`, `generate_variants`;
- `adplatform.dictionary`: `parse_lines`, `is_profane`.

## Validation helpers

```python
from adplatform.validation import (
    ValidationError,
    ValidationErrors,
    check_profanity,
    check_profanity_advanced,
    parse_validation_errors,
)

check_profanity("hello", basic, enabled=True)            # raises ValidationError("Found bad words")
check_profanity_advanced("hello", basic, enabled=True)   # also catches one-typo misspellings

errors = ValidationErrors({"age": [ValidationError("range")]})
api_error = parse_validation_errors(errors)
str(api_error)  # "Invalid input: Field age failed validation with error: range"
```

With `enabled=False` both checks accept any text.

## Errors

`adplatform.errors.ApiError` and its subclasses know their error code and HTTP
status:

- `NotFoundError`, `NotOwnerError`, `InvalidInputError`,
  `ValidationFailedError`, `CampaignStartedError`, `JsonError`,
  `DatabaseError`, `FileHostError`;
- `CustomApiError(error, status_code, message)` for an error with its own code,
  status and message.

`error_response()` returns the status and the JSON body. `not_found()` gives
the response for an unknown route.

## Images

`adplatform.images.validate_image(size, content_type)` rejects a file larger
than 5.7 MB with status 413. It rejects a type other than `image/jpeg`,
`image/pjpeg`, `image/png` or `image/webp` with status 415.

`ImageStore` keeps one `StoredImage` per campaign in a bucket. The bucket
lives in a mapping that you pass in, or in a new dictionary.

## Access log

`adplatform.access_log.format_access_line` formats one request line.
`level_for_status` logs 5xx responses at `ERROR` and everything else at
`DEBUG`.

## API catalogue

```python
from adplatform.api.openapi import Router, all_endpoints, build_openapi

router = Router(all_endpoints())
match = router.resolve("GET", "/advertisers/0190a6c4-0000-7000-8000-000000000000/campaigns")
match.endpoint.operation_id  # "list_campaigns"
match.params                 # {"advertiser_id": "0190a6c4-..."}

spec = build_openapi()  # OpenAPI 3.1 document as a dict
```

`Router.resolve` ignores the query string and returns `None` when no route
matches.

## Configuration

`adplatform.env_config.Config` reads typed `Variable`s from the environment.
A variable is read once, on first access or on `init()`. A missing variable
falls back to its default, with a warning. A value that does not parse raises
`InvalidVariableError`.

## Rounding

```python
from adplatform.rounding import round_to_digits

round_to_digits(10 / 3, 2)  # 3.33
```

Halves are rounded away from zero.

## The Telegram bot

```
adplatform-bot
```

Configuration comes from the environment:

- `TELOXIDE_TOKEN` holds the bot token.
- `BACKEND_ADDRESS` is where the bot reaches the backend, as
  `http://<BACKEND_ADDRESS>/...`. It defaults to `localhost:8080`.

The bot long-polls for updates until it is interrupted.

A conversation goes like this:

1. `/start` offers two buttons, **Войти** (log in) and **Зарегистрироваться**
   (register).
2. Logging in asks for an advertiser UUID and looks it up with
   `GET /advertisers/<uuid>`. Registering asks for a name and creates the
   advertiser with `POST /advertisers/bulk`.
3. On success the bot greets the advertiser and shows the panel menu.
4. **Выйти из аккаунта** (log out) returns the chat to the start state.

Messages that fit no state get a hint to send `/start`. Dialogue states live
in memory (`adplatform.bot.state.InMemoryStorage`) and are lost on restart.

## What this package does not do

- It does not include the backend server. The endpoint catalogue describes
  and routes requests, but no handler stores or serves clients, advertisers,
  campaigns, ads, statistics or time.
- There is no database layer.
- Images are kept only in the mapping you give to `ImageStore`; no object
  storage service is contacted.
- The bot needs a running backend. The panel's **Аккаунт**, **Мои кампании**
  and **Статистика** buttons are shown, but nothing handles them yet.
- No dictionary of bad words ships with the package; you supply your own.
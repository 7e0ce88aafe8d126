# dbom

dbom is a small document database. Each collection is a JSON file,
`<name>.json`, in a data directory. Every document that is inserted is given
a fresh random version 4 UUID as its `id`, replacing any `id` it came with.
Every change to a collection is written to its file at once.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Interactive shell

```
dbom
```

The shell creates a `data/` directory in the current working directory if
nothing exists there yet, opens the `default` collection and shows the
collection in use in its prompt, for example `[dbom:default]>`. It reads one
command per line:

| Command                     | Effect                                        |
|-----------------------------|-----------------------------------------------|
| `insert <json>`             | Insert a document given as a JSON object      |
| `get <id>`                  | Print a document as JSON                      |
| `delete <id>`               | Remove a document                             |
| `list`                      | Print every document of the collection        |
| `use <collection>`          | Open a collection, starting it if it is new   |
| `list-collections`          | Print the names of all collections, sorted    |
| `delete-collection <name>`  | Remove a collection's file                    |
| `help`                      | Show the command list                         |
| `exit` / `quit`             | Leave the shell                               |

The shell also stops at the end of its input. Its messages are in Portuguese.

Example session:

```
[dbom:default]>insert {"name": "Ada", "age": 36, "tags": ["math", "engines"]}
Documento inserido.
[dbom:default]>list
{"age":36,"id":"...","name":"Ada","tags":["math","engines"]}
[dbom:default]>use people
Usando coleção: people
```

## Documents

A document has an `id` and a flat mapping of fields. Field values can be
strings, integers, floats, booleans or lists of strings.

- `Document.to_json()` writes compact JSON with sorted keys. Booleans are
  written as the strings `"true"` and `"false"`, so they come back as
  strings after a save and reload.
- `Document.from_json(text)` reads a JSON object. Fields holding `null` or
  nested objects are dropped. It raises `DocumentError` (a `ValueError`) for
  text that is not valid JSON, for JSON that is not an object, for an `id`
  that is not a string, and for an array holding anything but strings. The
  JSON values `null` and `[]` give an empty document.

## Library use

```python
from dbom.database import Database, create_data_directory
from dbom.document import Document

create_data_directory("data")
db = Database("data")
people = db.use_collection("people")

doc_id = people.insert(Document.from_json('{"name": "Ada"}'))
print(people.get(doc_id).to_json())
print(len(people), doc_id in people)

for doc in people:
    print(doc.fields)

people.remove(doc_id)          # True if the document existed
print(db.list_collections())
db.delete_collection("people") # True if the file was removed
```

`Database.current()` returns the collection last opened with
`use_collection`, or `None` before one is opened. `Collection.get` returns
`None` for an unknown id. The data directory must exist before a collection
is changed, since each change writes the collection's file.

`dbom.repl.run_repl(db, stdin, stdout, stderr)` runs the shell over any text
streams, and `dbom.ids.generate_uuid_v4()` returns a new random UUID string.

## What it does not do

- There are no queries, filters or indexes: documents are found by `id`
  only, and `list` returns all of them.
- There is no update command; a changed document is inserted again under a
  new `id`.
- There is no server and no locking: a collection is read from its file
  when it is opened and overwritten on each change, so it is meant for one
  process at a time.
"""Interactive command loop over a database."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from dbom.database import Database, create_data_directory
from dbom.document import Document

DATA_DIR = "data"

HELP_TEXT = (
    "Comandos disponiveis:\n"
    "  insert <json>               - Insere um documento.\n"
    "  get <id>                    - Exibe um documento.\n"
    "  delete <id>                 - Remove um documento.\n"
    "  list                        - Lista os documentos da colecao.\n"
    "  use {collection}            - Insere/Alterna uma colecao.\n"
    "  list-collections            - Lista todas as colecoes.\n"
    "  delete-collection <name>    - Remove a colecao.\n"
    "  exit                        - Encerra o programa.\n"
)


def _first_token(text: str) -> str:
    tokens = text.split()
    return tokens[0] if tokens else ""


def run_repl(
    db: Database,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> None:
    """Read commands line by line and run them against the database."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    def say(text: str) -> None:
        print(text, file=stdout)

    def complain(text: str) -> None:
        print(text, file=stderr)

    db.use_collection("default")
    say("DBom NoSQL interativo. Digite 'help' para ajuda.")

    while True:
        collection = db.current()
        stdout.write(f"[dbom:{collection.name}]>")
        stdout.flush()
        line = stdin.readline()
        if not line:
            break

        parts = line.rstrip("\n").split(None, 1)
        cmd = parts[0] if parts else ""
        rest = parts[1] if len(parts) > 1 else ""

        match cmd:
            case "exit" | "quit":
                say("Saindo...")
                break
            case "help":
                stdout.write(HELP_TEXT)
            case "insert":
                try:
                    collection.insert(Document.from_json(rest))
                    say("Documento inserido.")
                except (ValueError, TypeError, OSError):
                    complain("Erro ao interpretar JSON.")
            case "get":
                doc = collection.get(_first_token(rest))
                say(doc.to_json() if doc else "Documento não encontrado.")
            case "delete":
                try:
                    if collection.remove(_first_token(rest)):
                        say("Documento removido.")
                    else:
                        say("Documento nao encontrado.")
                except OSError as exc:
                    complain(str(exc))
            case "list":
                try:
                    for doc in collection.list():
                        say(doc.to_json())
                except (OSError, TypeError) as exc:
                    complain(str(exc))
            case "use":
                name = _first_token(rest)
                db.use_collection(name)
                say(f"Usando coleção: {name}")
            case "list-collections":
                for name in db.list_collections():
                    say(name)
            case "delete-collection":
                if db.delete_collection(_first_token(rest)):
                    say("Colecao removida.")
                else:
                    say("Colecao nao existe.")
            case _:
                say("Comando desconhecido. Digite 'help'.")


def main(argv: list[str] | None = None) -> int:
    """Prepare the data directory and start the interactive loop."""
    parser = argparse.ArgumentParser(prog="dbom", description="Interactive document store.")
    parser.parse_args(argv)
    try:
        create_data_directory(DATA_DIR)
        print("Diretorio de dados criado.")
    except OSError as exc:
        print(f"Erro ao criar diretorio de dados: {exc}", file=sys.stderr)
    run_repl(Database(DATA_DIR))
    return 0
"""Look up a user and branch on the returned `Result`."""

from typing import Annotated, NamedTuple

import typer
from rich.console import Console
from rich.text import Text

import pyoresult as pr
from pyoresult import result

CONSOLE = Console()
app = typer.Typer(help="Fetch a user by id and report the outcome.")


class User(NamedTuple):
    """A known user."""

    id: int
    name: str


class UserError(NamedTuple):
    """Why a lookup failed."""

    message: str
    path: str


DEFAULT_USER = User(id=0, name="Default")


def fetch_user(user_id: int) -> pr.Result[User, UserError]:
    """Do something that could fail."""
    if user_id == 1:
        return result.ok(User(id=1, name="John"))
    return result.err(UserError(message="User not found", path=f"/users/{user_id}"))


@app.command()
def main(
    user_id: Annotated[int, typer.Option(help="Id of the user to fetch.")] = 1,
) -> None:
    """Fetch a user, print its name or the error, then the name with a fallback."""
    res = fetch_user(user_id)
    match res:
        case pr.Ok(user):
            CONSOLE.print(Text(user.name, style="green"))
        case pr.Err(error):
            CONSOLE.print(Text(f"{error.message} ({error.path})", style="yellow"))

    CONSOLE.print(result.unwrap_or(res, DEFAULT_USER).name)
    if result.is_err(res):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()

"""Quick Start Example - Building and Rendering Error Chains.

This example demonstrates the basic usage of errchain: wrapping failures
as they travel up the call stack, rendering the chain and walking it.
"""

import logging
from pathlib import Path

import errchain
from errchain import FormatType, config


def new_repository(dsn: str):
    """Fails like a database driver would."""
    try:
        raise ConnectionRefusedError(f"connection refused: {dsn}")
    except ConnectionRefusedError as e:
        return errchain.propagate(e, "could not connect to database")


def new_service():
    err = new_repository("postgres://localhost:5432/app")
    return errchain.propagate(err, "could not create repository")


def new_controller():
    err = new_service()
    return errchain.propagate(err, "could not create service")


def example_render():
    """Example: Full and short rendering."""
    print("=== Render Example ===")

    err = new_controller()

    print(err)                     # default (FULL)
    print()
    print(f"{err:#}")              # SHORT
    print(f"[{err:#.40}]")         # SHORT, truncated
    print()
    print(errchain.render(err, FormatType.SHORT))


def example_walk():
    """Example: Walking the chain."""
    print("\n=== Walk Example ===")

    err = new_controller()

    root = errchain.cause(err)
    print(f"root cause: {root!r}")

    refused = errchain.as_(err, ConnectionRefusedError)
    print(f"as_(ConnectionRefusedError): {refused}")
    print(f"is_(root): {errchain.is_(err, root)}")

    # Nothing to report: propagate short-circuits
    print(f"propagate(None): {errchain.propagate(None, 'unused')}")


def main():
    """Run all examples."""
    logging.basicConfig(level=logging.DEBUG)

    print("errchain Quick Start Examples")
    print("=" * 50)

    # Report paths relative to this directory
    config.configure(strip=errchain.make_path_stripper([str(Path(__file__).parent)]))

    example_render()
    example_walk()


if __name__ == "__main__":
    main()

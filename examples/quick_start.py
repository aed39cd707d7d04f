"""Quick Start Example - Annotated Error Chains.

This example demonstrates building annotated errors, wrapping them
across call layers, and reading the annotations back.
"""

from errchain import (
    collect_annotations,
    create_error,
    flatten_to_map,
    get_typed_value,
    make_annotation,
    wrap_error,
)


def fetch_row(table: str, row_id: int):
    """Simulated storage call that fails."""
    return create_error(
        "row not found",
        make_annotation("table", table),
        make_annotation("row_id", row_id),
    )


def load_user(user_id: int):
    """Service layer: wraps whatever storage returned."""
    err = fetch_row("users", user_id)
    return wrap_error(err, "load user", ("user_id", user_id), ("layer", "service"))


def example_chain():
    """Example: wrapping and reading annotations."""
    print("=== Chain Example ===")

    err = load_user(42)
    print(f"Text: {err}")
    print(f"Pairs: {[a.as_tuple() for a in collect_annotations(err)]}")
    print(f"Map: {flatten_to_map(err)}")

    table, ok = get_typed_value(err, "table", str)
    print(f"table={table!r} found={ok}")


def example_foreign_errors():
    """Example: standard exceptions inside the chain."""
    print("\n=== Foreign Error Example ===")

    try:
        try:
            raise create_error("socket closed", ("peer", "10.0.0.7"))
        except Exception as e:
            raise ConnectionError("request failed") from e
    except ConnectionError as e:
        err = wrap_error(e, "sync orders", ("batch", 7))

    print(f"Text: {err}")
    print(f"Map: {flatten_to_map(err)}")


def example_nil_wrap():
    """Example: wrapping None is a no-op."""
    print("\n=== None Wrap Example ===")

    print(f"wrap_error(None, ...) -> {wrap_error(None, 'never shown')}")


def main():
    """Run all examples."""
    print("errchain Quick Start Examples")
    print("=" * 50)

    example_chain()
    example_foreign_errors()
    example_nil_wrap()


if __name__ == "__main__":
    main()

"""Entry point for regenerating (or checking) the Lua API reference."""

from luadocs.gen_docs import main

if __name__ == "__main__":
    raise SystemExit(main())

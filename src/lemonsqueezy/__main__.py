"""`python -m lemonsqueezy` (mismo CLI que el script `lemonsqueezy`)."""

from lemonsqueezy.cli.main import app

if __name__ == "__main__":
    app(prog_name="lemonsqueezy")

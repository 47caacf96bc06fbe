"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from api_dna_linter.infrastructure.di.container import ApiDnaContainer
from api_dna_linter.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = ApiDnaContainer()

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        registry=container.get_rule_registry(),
        analyzer=container.get_analyzer(),
        fixture_verifier=container.get_fixture_verifier(),
        reporter=container.get_reporter(),
        guidance_service=container.get_guidance_service(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()

"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from jakarta_cdi_lint.infrastructure.di.container import JakartaLintContainer
from jakarta_cdi_lint.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = JakartaLintContainer()
    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        collect_use_case=container.get_collect_use_case(),
        reporter=container.get_reporter(),
        guidance_service=container.get_guidance_service(),
    )
    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()

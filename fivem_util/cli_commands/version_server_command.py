"""Artifact server queries for the fivem-utility CLI."""

from fivem_util.cli_helpers import exit_with_error, get_settings, map_exception_to_exit_code
from fivem_util.common.constants import ExitCodes
from fivem_util.common.errors import ArtifactNotFoundError
from fivem_util.core.artifacts import Artifact, ArtifactClient

LATEST = 'latest'


class VersionServerCommand:
    """Lists the server builds available from the artifact server."""

    @staticmethod
    def add_parser(subparsers) -> None:
        """Add version-server command parser to subparsers."""
        parser = subparsers.add_parser(
            'version-server',
            help='Give information about the versions available from the FiveM version server',
        )
        parser.add_argument('-w', '--use-windows-server', action='store_true',
                            help='Use the Windows artifact server (defaults to the Linux artifact server)')
        parser.add_argument('--get-url', metavar='VERSION',
                            help='Print only the URL of the given build number, or "latest"')
        parser.set_defaults(func=VersionServerCommand.execute)

    @staticmethod
    def execute(args) -> None:
        """List artifacts, or print the URL of a single one."""
        settings = get_settings(args)
        client = ArtifactClient(
            settings.artifacts_url(use_windows_server=args.use_windows_server),
            timeout=settings.http_timeout(),
        )

        if args.get_url is None:
            for artifact in client.list_artifacts():
                print(f"{artifact.number}\t{artifact.url}")
            return

        try:
            artifact = VersionServerCommand.find_artifact(client, args.get_url)
        except ValueError:
            exit_with_error(
                f"Invalid version '{args.get_url}': expected a build number or '{LATEST}'",
                ExitCodes.USAGE,
            )
            return
        except ArtifactNotFoundError as exc:
            exit_code = map_exception_to_exit_code(exc)
            if exit_code is None:
                exit_code = ExitCodes.ARTIFACT_NOT_FOUND
            exit_with_error(str(exc), exit_code)
            return

        print(artifact.url)

    @staticmethod
    def find_artifact(client: ArtifactClient, version: str) -> Artifact:
        """Resolve a build number or ``latest`` to an artifact.

        Raises:
            ValueError: If ``version`` is neither a number nor ``latest``
            ArtifactNotFoundError: If the artifact server does not list it
        """
        if version.strip().lower() == LATEST:
            artifact = client.latest_artifact()
        else:
            artifact = client.get_artifact(int(version))

        if artifact is None:
            raise ArtifactNotFoundError(f"Version '{version}' is not available on {client.base_url}")
        return artifact

import logging
import subprocess
from pathlib import Path

import jsii
from aws_cdk import BundlingOptions, ILocalBundling
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

logger = logging.getLogger(__name__)

LAMBDA_RUNTIME = _lambda.Runtime.PYTHON_3_13
LAMBDA_PYTHON_VERSION = "3.13"


@jsii.implements(ILocalBundling)
class PythonLocalBundling:
    """ローカル環境で Lambda 向けの依存ライブラリをインストールするBundlingクラス

    uv → pip の順に試し、どちらも失敗した場合は Docker でのバンドリングに任せる。
    pydantic-core などのバイナリは Lambda のプラットフォーム向けを取得する。
    """

    def __init__(self, source_path: str) -> None:
        self.source_path = source_path

    def try_bundle(self, output_dir: str, options: BundlingOptions) -> bool:
        """ローカルでバンドリングを試行する。

        Returns:
            True: バンドリング成功（Dockerをスキップ）
            False: バンドリング失敗（Dockerにフォールバック）
        """
        del options  # unused
        requirements_path = Path(self.source_path) / "requirements.txt"
        if not requirements_path.exists():
            logger.warning("requirements.txt not found: %s", requirements_path)
            return False

        target_dir = Path(output_dir) / "python"
        for installer, command in self._install_commands(requirements_path, target_dir):
            if self._run(installer, command):
                return True

        logger.warning("Local bundling failed, falling back to Docker")
        return False

    @staticmethod
    def _install_commands(
        requirements_path: Path, target_dir: Path
    ) -> list[tuple[str, list[str]]]:
        requirements = str(requirements_path)
        target = str(target_dir)
        return [
            (
                "uv",
                [
                    "uv",
                    "pip",
                    "install",
                    "-r",
                    requirements,
                    "--target",
                    target,
                    "--python-platform",
                    "x86_64-manylinux2014",
                    "--python-version",
                    LAMBDA_PYTHON_VERSION,
                    "--quiet",
                ],
            ),
            (
                "pip",
                [
                    "pip",
                    "install",
                    "-r",
                    requirements,
                    "-t",
                    target,
                    "--platform",
                    "manylinux2014_x86_64",
                    "--only-binary=:all:",
                    "--python-version",
                    LAMBDA_PYTHON_VERSION,
                    "--quiet",
                ],
            ),
        ]

    @staticmethod
    def _run(installer: str, command: list[str]) -> bool:
        try:
            logger.info("Trying local bundling with %s...", installer)
            subprocess.run(command, check=True)
        except FileNotFoundError:
            logger.debug("%s not found", installer)
            return False
        except subprocess.CalledProcessError as e:
            logger.debug("%s install failed: %s", installer, e)
            return False
        logger.info("Local bundling with %s succeeded", installer)
        return True


class Layers(Construct):
    """Lambda Layers Construct（powertools / pydantic などの共通依存）"""

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        layer_source_path = "layers/common_layer"

        self.common_layer = _lambda.LayerVersion(
            self,
            "CommonLayer",
            code=_lambda.Code.from_asset(
                layer_source_path,
                bundling=BundlingOptions(
                    image=LAMBDA_RUNTIME.bundling_image,
                    command=[
                        "bash",
                        "-c",
                        "pip install -r requirements.txt -t /asset-output/python",
                    ],
                    local=PythonLocalBundling(layer_source_path),
                ),
            ),
            compatible_runtimes=[LAMBDA_RUNTIME],
            description="Common dependencies for hangar booking functions",
        )

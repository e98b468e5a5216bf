"""Posts Stack - Lambda functions implementing the posts CRUD handlers."""

import os

from aws_cdk import BundlingOptions, Duration, RemovalPolicy, Stack
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_iam as iam
from aws_cdk import aws_lambda as lambda_
from aws_cdk import aws_logs as logs
from aws_cdk import aws_s3 as s3
from aws_cdk import aws_ssm as ssm
from constructs import Construct

PROJECT_ROOT = os.path.join(os.path.dirname(__file__), "..", "..")
RUNTIME = lambda_.Runtime.PYTHON_3_12


class PostsStack(Stack):
    """One Lambda function per posts route, sharing a dependencies layer."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        posts_table: dynamodb.Table,
        gallery_bucket: s3.Bucket,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        dependencies_layer = self._create_layer(
            "PostRepositoryLayer",
            "PostRepositoryLayer",
            os.path.join(PROJECT_ROOT, "lambda-layer"),
        )

        # Published so other stacks can reuse the layer
        ssm.StringParameter(
            self,
            "PostRepositoryLayerVersionArn",
            parameter_name="PostRepositoryLayerVersionArn",
            string_value=dependencies_layer.layer_version_arn,
        )

        gallery_password = ssm.StringParameter.value_for_string_parameter(self, "GalleryPassword")

        environment = {
            "POSTS_DDB": posts_table.table_name,
            "GALLERY_BUCKET": gallery_bucket.bucket_name,
            "GALLERY_PASSWORD": gallery_password,
            "LOG_LEVEL": "INFO",
        }

        # Only the gallery package is shipped; dependencies come from the layer
        code = lambda_.Code.from_asset(
            PROJECT_ROOT,
            exclude=[
                "infra",
                "tests",
                "lambda-layer",
                "cdk.out",
                ".*",
                "*.md",
                "*.toml",
                "*.txt",
                "**/__pycache__",
                "*.pyc",
            ],
        )

        def create_function(construct_id: str, module: str) -> lambda_.Function:
            return self._create_function(
                construct_id,
                f"gallery.presentation.handlers.{module}.handler",
                code,
                [dependencies_layer],
                environment,
            )

        self.get_posts_handler = create_function("GetPostsHandler", "get_posts")
        self.get_post_handler = create_function("GetPostHandler", "get_post")
        self.create_post_handler = create_function("CreatePostHandler", "create_post")
        self.update_post_handler = create_function("UpdatePostHandler", "update_post")
        self.delete_post_handler = create_function("DeletePostHandler", "delete_post")

        # Least-privilege table access per handler
        self.get_posts_handler.add_to_role_policy(self._table_policy(posts_table, "dynamodb:Scan"))
        self.get_post_handler.add_to_role_policy(self._table_policy(posts_table, "dynamodb:Query"))

        self.create_post_handler.add_to_role_policy(
            self._table_policy(posts_table, "dynamodb:PutItem")
        )
        gallery_bucket.grant_read_write(self.create_post_handler)

        # GetItem covers the stored-key lookup when an image is replaced
        self.update_post_handler.add_to_role_policy(
            self._table_policy(posts_table, "dynamodb:UpdateItem", "dynamodb:GetItem")
        )
        gallery_bucket.grant_read_write(self.update_post_handler)

        self.delete_post_handler.add_to_role_policy(
            self._table_policy(posts_table, "dynamodb:DeleteItem")
        )
        gallery_bucket.grant_delete(self.delete_post_handler)

    def _create_function(
        self,
        construct_id: str,
        handler: str,
        code: lambda_.Code,
        layers: list[lambda_.ILayerVersion],
        environment: dict[str, str],
    ) -> lambda_.Function:
        return lambda_.Function(
            self,
            construct_id,
            function_name=construct_id,
            runtime=RUNTIME,
            handler=handler,
            code=code,
            layers=layers,
            environment=environment,
            timeout=Duration.seconds(10),
            memory_size=128,
            tracing=lambda_.Tracing.ACTIVE,
            insights_version=lambda_.LambdaInsightsVersion.VERSION_1_0_119_0,
            log_retention=logs.RetentionDays.ONE_MONTH,
        )

    def _create_layer(self, construct_id: str, name: str, path: str) -> lambda_.LayerVersion:
        return lambda_.LayerVersion(
            self,
            construct_id,
            layer_version_name=name,
            code=lambda_.Code.from_asset(
                path,
                bundling=BundlingOptions(
                    image=RUNTIME.bundling_image,
                    command=[
                        "bash",
                        "-c",
                        "pip install -r requirements.txt -t /asset-output/python",
                    ],
                ),
            ),
            compatible_runtimes=[RUNTIME],
            description="Runtime dependencies of the posts handlers",
            removal_policy=RemovalPolicy.DESTROY,
        )

    @staticmethod
    def _table_policy(table: dynamodb.Table, *actions: str) -> iam.PolicyStatement:
        return iam.PolicyStatement(
            effect=iam.Effect.ALLOW,
            actions=list(actions),
            resources=[table.table_arn],
        )

"""Gallery Stack - REST API, custom domain and request validation for posts."""

from aws_cdk import RemovalPolicy, Stack
from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_lambda as lambda_
from aws_cdk import aws_logs as logs
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from aws_cdk import aws_ssm as ssm
from constructs import Construct

POST_FIELDS = ("title", "author", "description", "locale", "datePost")


def _string() -> apigw.JsonSchema:
    return apigw.JsonSchema(type=apigw.JsonSchemaType.STRING)


class GalleryStack(Stack):
    """API Gateway in front of the posts handlers, served on a subdomain."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        get_posts_handler: lambda_.IFunction,
        get_post_handler: lambda_.IFunction,
        create_post_handler: lambda_.IFunction,
        update_post_handler: lambda_.IFunction,
        delete_post_handler: lambda_.IFunction,
        zone_name: str,
        subdomain: str,
        certificate_arn_parameter: str,
        hosted_zone_id_parameter: str,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        log_group = logs.LogGroup(
            self,
            "ApiGalleryLogs",
            log_group_name="ApiGalleryLogs",
            removal_policy=RemovalPolicy.DESTROY,
        )

        certificate_arn = ssm.StringParameter.value_for_string_parameter(
            self, certificate_arn_parameter
        )

        self.api = apigw.RestApi(
            self,
            "GalleryApi",
            rest_api_name="GalleryApi",
            cloud_watch_role=True,
            deploy_options=apigw.StageOptions(
                access_log_destination=apigw.LogGroupLogDestination(log_group),
                access_log_format=apigw.AccessLogFormat.json_with_standard_fields(
                    http_method=True,
                    ip=True,
                    protocol=True,
                    request_time=True,
                    resource_path=True,
                    response_length=True,
                    status=True,
                    caller=True,
                    user=True,
                ),
            ),
            domain_name=apigw.DomainNameOptions(
                domain_name=f"{subdomain}.{zone_name}",
                certificate=acm.Certificate.from_certificate_arn(
                    self, "CertificateGalleryApiGateway", certificate_arn
                ),
            ),
        )

        # Expose the validator message when a body fails its model
        self.api.add_gateway_response(
            "BadRequestResponse",
            type=apigw.ResponseType.BAD_REQUEST_BODY,
            templates={
                "application/json": (
                    '{"statusCode": 400, "message": "$context.error.message", '
                    '"description": "$context.error.validationErrorString"}'
                ),
            },
        )

        self._create_subdomain(zone_name, subdomain, hosted_zone_id_parameter)
        self._create_endpoints(
            get_posts_handler,
            get_post_handler,
            create_post_handler,
            update_post_handler,
            delete_post_handler,
        )

        self.api_url = self.api.url

    def _create_subdomain(self, zone_name: str, subdomain: str, hosted_zone_id_parameter: str) -> None:
        hosted_zone_id = ssm.StringParameter.value_for_string_parameter(
            self, hosted_zone_id_parameter
        )
        zone = route53.PublicHostedZone.from_hosted_zone_attributes(
            self,
            "SubdomainGalleryApi",
            hosted_zone_id=hosted_zone_id,
            zone_name=zone_name,
        )
        route53.ARecord(
            self,
            "ApiGalleryRecord",
            zone=zone,
            target=route53.RecordTarget.from_alias(targets.ApiGateway(self.api)),
            record_name=subdomain,
        )

    def _create_endpoints(
        self,
        get_posts_handler: lambda_.IFunction,
        get_post_handler: lambda_.IFunction,
        create_post_handler: lambda_.IFunction,
        update_post_handler: lambda_.IFunction,
        delete_post_handler: lambda_.IFunction,
    ) -> None:
        create_post_model = self._create_model(
            "CreatePostModel",
            properties={
                **{name: _string() for name in POST_FIELDS},
                "image": _string(),
                "password": _string(),
            },
            required=[*POST_FIELDS, "image", "password"],
        )
        update_post_model = self._create_model(
            "UpdatePostModel",
            properties={
                **{name: _string() for name in POST_FIELDS},
                "image": apigw.JsonSchema(
                    type=[apigw.JsonSchemaType.STRING, apigw.JsonSchemaType.NULL]
                ),
                "createdAt": _string(),
                "password": _string(),
            },
            required=[*POST_FIELDS, "createdAt", "password"],
        )
        delete_post_model = self._create_model(
            "DeletePostModel",
            properties={"createdAt": _string(), "password": _string()},
            required=["createdAt", "password"],
        )

        create_post_validator = self._create_validator("CreatePostValidator")
        update_post_validator = self._create_validator("UpdatePostValidator")
        delete_post_validator = self._create_validator(
            "DeletePostValidator", validate_request_parameters=True
        )

        posts = self.api.root.add_resource("posts")
        self._add_open_cors(posts)
        posts.add_method("GET", apigw.LambdaIntegration(get_posts_handler))
        posts.add_method(
            "POST",
            apigw.LambdaIntegration(create_post_handler),
            request_validator=create_post_validator,
            request_models={"application/json": create_post_model},
        )

        post = posts.add_resource("{id}")
        self._add_open_cors(post)
        post.add_method("GET", apigw.LambdaIntegration(get_post_handler))
        post.add_method(
            "PUT",
            apigw.LambdaIntegration(update_post_handler),
            request_validator=update_post_validator,
            request_models={"application/json": update_post_model},
        )
        post.add_method(
            "DELETE",
            apigw.LambdaIntegration(delete_post_handler),
            request_validator=delete_post_validator,
            request_models={"application/json": delete_post_model},
        )

    @staticmethod
    def _add_open_cors(resource: apigw.Resource) -> None:
        resource.add_cors_preflight(
            allow_origins=apigw.Cors.ALL_ORIGINS,
            allow_headers=["*"],
            allow_methods=apigw.Cors.ALL_METHODS,
        )

    def _create_model(
        self,
        model_name: str,
        properties: dict[str, apigw.JsonSchema],
        required: list[str],
    ) -> apigw.Model:
        return apigw.Model(
            self,
            model_name,
            rest_api=self.api,
            model_name=model_name,
            content_type="application/json",
            schema=apigw.JsonSchema(
                type=apigw.JsonSchemaType.OBJECT,
                properties=properties,
                required=required,
            ),
        )

    def _create_validator(
        self, name: str, validate_request_parameters: bool = False
    ) -> apigw.RequestValidator:
        return apigw.RequestValidator(
            self,
            name,
            rest_api=self.api,
            request_validator_name=name,
            validate_request_body=True,
            validate_request_parameters=validate_request_parameters,
        )

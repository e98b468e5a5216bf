#!/usr/bin/env python3
"""CDK App for the Gallery Posts API infrastructure."""

import os

import aws_cdk as cdk

from stacks import (
    GalleryBucketStack,
    GalleryStack,
    PostsStack,
    PostsTableStack,
)

app = cdk.App()

env = cdk.Environment(
    account=os.environ.get("CDK_DEFAULT_ACCOUNT"),
    region=app.node.try_get_context("region") or "sa-east-1",
)

tags = {
    "cost": "Galeria",
    "team": app.node.try_get_context("team") or "Gallery",
}

# Storage - S3 bucket for images, DynamoDB table for posts
gallery_bucket_stack = GalleryBucketStack(app, "GalleryBucketStack", env=env, tags=tags)
posts_table_stack = PostsTableStack(app, "PostsDdbStack", env=env, tags=tags)

# Handlers - one Lambda per route
posts_stack = PostsStack(
    app,
    "PostsStack",
    posts_table=posts_table_stack.posts_table,
    gallery_bucket=gallery_bucket_stack.gallery_bucket,
    env=env,
    tags=tags,
)
posts_stack.add_dependency(gallery_bucket_stack)
posts_stack.add_dependency(posts_table_stack)

# API - API Gateway + custom domain
gallery_stack = GalleryStack(
    app,
    "GalleryStack",
    get_posts_handler=posts_stack.get_posts_handler,
    get_post_handler=posts_stack.get_post_handler,
    create_post_handler=posts_stack.create_post_handler,
    update_post_handler=posts_stack.update_post_handler,
    delete_post_handler=posts_stack.delete_post_handler,
    zone_name=app.node.try_get_context("zone_name") or "cauahenrique.com",
    subdomain=app.node.try_get_context("subdomain") or "apinossagaleria",
    certificate_arn_parameter=app.node.try_get_context("certificate_arn_parameter")
    or "CauaHenriqueCertificateDomainArn",
    hosted_zone_id_parameter=app.node.try_get_context("hosted_zone_id_parameter")
    or "CauaHenriqueHostedZoneId",
    env=env,
    tags=tags,
)
gallery_stack.add_dependency(posts_stack)

app.synth()

"""
AWS Lambda handler for FastAPI application using Mangum.
Exposes the FastAPI app as a Lambda function compatible with API Gateway.
"""

import logging
from mangum import Mangum
from app.config import get_settings
from app.main import app

# Configure logging for Lambda
logger = logging.getLogger()
logger.setLevel(logging.INFO)

# Wrap the FastAPI app; the base path strips an API Gateway stage prefix
handler = Mangum(app, lifespan="off", api_gateway_base_path=get_settings().api_base_path)


def lambda_handler(event, context):
    """
    AWS Lambda entry point.

    Parameters
    ----------
    event : dict
        API Gateway event object containing the HTTP request details
    context : LambdaContext
        AWS Lambda context object with runtime information

    Returns
    -------
    dict
        API Gateway-compatible response with statusCode, headers, and body
    """
    logger.info("Received event: %s", event.get("requestContext", {}).get("requestId", "unknown"))
    return handler(event, context)

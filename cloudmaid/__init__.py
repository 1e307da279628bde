"""Read CloudFormation JSON templates and render their Lambda, SQS and API Gateway resources as Mermaid flowcharts."""

__version__ = "0.1.0"
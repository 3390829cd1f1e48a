# src/alb2json/transcode/schema.py
# Field definitions from the AWS docs:
# https://docs.aws.amazon.com/elasticloadbalancing/latest/application/load-balancer-access-logs.html
from typing import List

from alb2json.core.models import Field, FieldKind

K = FieldKind


def alb_log_spec() -> List[Field]:
    """Positional layout of one Application Load Balancer access log entry."""
    return [
        Field("type", K.STRING),
        Field("timestamp", K.STRING),
        Field("elb", K.STRING),
        Field("client", K.HOST_PORT),
        Field("target", K.HOST_PORT),
        Field("request_processing_time_seconds", K.FLOAT),
        Field("target_processing_time_seconds", K.FLOAT),
        Field("response_processing_time", K.FLOAT),
        Field("elb_status_code", K.INTEGER),
        Field("target_status_code", K.INTEGER),
        Field("received_bytes", K.INTEGER),
        Field("sent_bytes", K.INTEGER),
        Field("request", K.STRING),
        Field("user_agent", K.STRING),
        Field("ssl_cipher", K.STRING),
        Field("ssl_protocol", K.STRING),
        Field("target_group_arn", K.STRING),
        Field("trace_id", K.STRING),
        Field("domain_name", K.STRING),
        Field("chosen_cert_arn", K.STRING),
        Field("matched_rule_priority", K.INTEGER),
        Field("request_creation_time", K.STRING),
        Field("actions_executed", K.COMMA_LIST),
        Field("redirect_url", K.STRING),
        Field("error_reason", K.STRING),
        Field("targets_all", K.HOST_PORT_LIST),
        Field("target_status_codes_all", K.INTEGER_LIST),
    ]

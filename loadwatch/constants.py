PLUGIN_NAME = "cloudwatch"

PLUGIN_PARAM_NAMESPACE = "namespace"
PLUGIN_PARAM_REGION = "region"
PLUGIN_PARAM_DIMENSIONS = "dimensions"

AVERAGE_LATENCY_METRIC = "AverageLatency"
ERROR_METRIC = "Error"

STATUS_CODE_BUCKETS = ("2XX", "3XX", "4XX", "5XX")

NANOSECONDS_PER_MILLISECOND = 1_000_000

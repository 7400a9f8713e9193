"""Closed value sets of the SQS API."""

from ...application.enums import ClosedEnum


class QueueAttributeName(ClosedEnum):
    ALL = "All"
    APPROXIMATE_NUMBER_OF_MESSAGES = "ApproximateNumberOfMessages"
    APPROXIMATE_NUMBER_OF_MESSAGES_DELAYED = "ApproximateNumberOfMessagesDelayed"
    APPROXIMATE_NUMBER_OF_MESSAGES_NOT_VISIBLE = "ApproximateNumberOfMessagesNotVisible"
    CONTENT_BASED_DEDUPLICATION = "ContentBasedDeduplication"
    CREATED_TIMESTAMP = "CreatedTimestamp"
    DEDUPLICATION_SCOPE = "DeduplicationScope"
    DELAY_SECONDS = "DelaySeconds"
    FIFO_QUEUE = "FifoQueue"
    FIFO_THROUGHPUT_LIMIT = "FifoThroughputLimit"
    KMS_DATA_KEY_REUSE_PERIOD_SECONDS = "KmsDataKeyReusePeriodSeconds"
    KMS_MASTER_KEY_ID = "KmsMasterKeyId"
    LAST_MODIFIED_TIMESTAMP = "LastModifiedTimestamp"
    MAXIMUM_MESSAGE_SIZE = "MaximumMessageSize"
    MESSAGE_RETENTION_PERIOD = "MessageRetentionPeriod"
    POLICY = "Policy"
    QUEUE_ARN = "QueueArn"
    RECEIVE_MESSAGE_WAIT_TIME_SECONDS = "ReceiveMessageWaitTimeSeconds"
    REDRIVE_ALLOW_POLICY = "RedriveAllowPolicy"
    REDRIVE_POLICY = "RedrivePolicy"
    SQS_MANAGED_SSE_ENABLED = "SqsManagedSseEnabled"
    VISIBILITY_TIMEOUT = "VisibilityTimeout"

class StorageURI:
    SCHEME = "gs://"


class InferenceAPI:
    QUERY_PARAM = "gcs_uri"
    SUCCESS_STATUS = 200

from loguru import logger as log  # noqa: F401

app_short_name = "logoicons"
app_long_name = "Logo Icon Generator"

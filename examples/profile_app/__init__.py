"""Sample web application using the Yoti client."""

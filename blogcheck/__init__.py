from blogcheck.validate import validate_blog_post_form_data
from blogcheck.validate import validate_email_address_structure

from .menu_item import MenuItemModel
from .about_us import AboutUsModel
from .doctor import DoctorModel
from .management_staff import ManagementStaffModel
from .service import ServiceModel
from .news import NewsModel
from .contact_message import ContactMessageModel

__all__ = [
    "MenuItemModel",
    "AboutUsModel",
    "DoctorModel",
    "ManagementStaffModel",
    "ServiceModel",
    "NewsModel",
    "ContactMessageModel",
]

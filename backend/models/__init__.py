from models.products import Product
from models.orders import Order
from models.order_items import OrderItem
from models.stock_audit import StockAudit
from models.inventory_in import InventoryIn, InventoryInItem
from models.ledger import LedgerEntry, LedgerPayment

__all__ = ['InventoryIn', 'InventoryInItem', 'LedgerEntry', 'LedgerPayment', 'Order', 'OrderItem', 'Product', 'StockAudit',]

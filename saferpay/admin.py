from django.contrib import admin
from saferpay.models import OrderTransaction


class OrderTransactionAdmin(admin.ModelAdmin):
    list_display = ('order_number', 'method', 'saferpay_id', 'amount',
                    'currency', 'result', 'date_created')
    readonly_fields = ('order_number', 'method', 'saferpay_id', 'account_id',
                       'amount', 'currency', 'action', 'result',
                       'request_data', 'response_data', 'date_created')


admin.site.register(OrderTransaction, OrderTransactionAdmin)
